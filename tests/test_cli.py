"""Tests for guildperms CLI commands."""

from typer.testing import CliRunner

from guildperms.cli import app


runner = CliRunner()


class TestVersion:
    """Tests for the --version flag."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "guildperms" in result.stdout


class TestFlagsCommand:
    """Tests for guildperms flags."""

    def test_expands_bitmask(self) -> None:
        result = runner.invoke(app, ["flags", "3072"])

        assert result.exit_code == 0
        assert "VIEW_CHANNEL" in result.stdout
        assert "SEND_MESSAGES" in result.stdout

    def test_accepts_hex(self) -> None:
        result = runner.invoke(app, ["flags", "0x8"])

        assert result.exit_code == 0
        assert "ADMINISTRATOR" in result.stdout

    def test_warns_about_uncatalogued_bits(self) -> None:
        result = runner.invoke(app, ["flags", str(1 << 60)])

        assert result.exit_code == 0
        assert "Uncatalogued" in result.stdout

    def test_rejects_garbage(self) -> None:
        result = runner.invoke(app, ["flags", "lots"])

        assert result.exit_code == 1


class TestBitsCommand:
    """Tests for guildperms bits."""

    def test_combines_names(self) -> None:
        result = runner.invoke(app, ["bits", "VIEW_CHANNEL", "send_messages"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "3072"

    def test_unknown_name(self) -> None:
        result = runner.invoke(app, ["bits", "TELEPORT"])

        assert result.exit_code == 1
        assert "Unknown permission" in result.stdout


class TestGuildCommand:
    """Tests for guildperms guild."""

    def test_member_permissions(self, snapshot_file) -> None:
        result = runner.invoke(app, ["guild", str(snapshot_file), "-m", "20", "-g", "1"])

        assert result.exit_code == 0
        assert "MANAGE_MESSAGES" in result.stdout
        assert "SEND_MESSAGES" in result.stdout

    def test_owner(self, snapshot_file) -> None:
        result = runner.invoke(app, ["guild", str(snapshot_file), "-m", "10", "-g", "1"])

        assert result.exit_code == 0
        assert "ADMINISTRATOR" in result.stdout

    def test_require_missing(self, snapshot_file) -> None:
        result = runner.invoke(
            app,
            ["guild", str(snapshot_file), "-m", "20", "-g", "1", "-r", "VIEW_CHANNEL", "-r", "BAN_MEMBERS"],
        )

        assert result.exit_code == 1
        assert "BAN_MEMBERS" in result.stdout

    def test_require_present(self, snapshot_file) -> None:
        result = runner.invoke(
            app, ["guild", str(snapshot_file), "-m", "20", "-g", "1", "-r", "MANAGE_MESSAGES"]
        )

        assert result.exit_code == 0

    def test_owner_require_unknown_name(self, snapshot_file) -> None:
        result = runner.invoke(
            app, ["guild", str(snapshot_file), "-m", "10", "-g", "1", "-r", "BOGUS"]
        )

        assert result.exit_code == 1
        assert "Unknown permission: BOGUS" in result.stdout

    def test_unknown_member(self, snapshot_file) -> None:
        result = runner.invoke(app, ["guild", str(snapshot_file), "-m", "99", "-g", "1"])

        assert result.exit_code == 1
        assert "Member not found" in result.stdout


class TestChannelCommand:
    """Tests for guildperms channel."""

    def test_everyone_deny_applies(self, snapshot_file) -> None:
        result = runner.invoke(
            app, ["channel", str(snapshot_file), "-m", "20", "-c", "100", "-r", "SEND_MESSAGES"]
        )

        assert result.exit_code == 1
        assert "SEND_MESSAGES" in result.stdout

    def test_administrator_ignores_overwrites(self, snapshot_file) -> None:
        result = runner.invoke(
            app, ["channel", str(snapshot_file), "-m", "30", "-c", "100", "-r", "SEND_MESSAGES"]
        )

        assert result.exit_code == 0
        assert "ADMINISTRATOR" in result.stdout

    def test_private_channel(self, snapshot_file) -> None:
        result = runner.invoke(app, ["channel", str(snapshot_file), "-m", "20", "-c", "200"])

        assert result.exit_code == 0
        assert "ADMINISTRATOR" in result.stdout


class TestOutranksCommand:
    """Tests for guildperms outranks."""

    def test_higher_position_outranks(self, snapshot_file) -> None:
        result = runner.invoke(
            app, ["outranks", str(snapshot_file), "-g", "1", "-m", "20", "--role", "3"]
        )

        assert result.exit_code == 0

    def test_lower_position_does_not(self, snapshot_file) -> None:
        result = runner.invoke(
            app, ["outranks", str(snapshot_file), "-g", "1", "-m", "30", "--role", "2"]
        )

        assert result.exit_code == 1

    def test_unknown_role(self, snapshot_file) -> None:
        result = runner.invoke(
            app, ["outranks", str(snapshot_file), "-g", "1", "-m", "20", "--role", "77"]
        )

        assert result.exit_code == 1
        assert "Role not found" in result.stdout


class TestInvalidSnapshot:
    """Tests for snapshot file errors."""

    def test_invalid_snapshot(self, tmp_path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("guilds:\n  - id: nope\n")

        result = runner.invoke(app, ["guild", str(path), "-m", "1", "-g", "1"])

        assert result.exit_code == 1
        assert "Invalid snapshot file" in result.stdout
