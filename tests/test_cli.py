"""
Tests for the command line interface.
"""

import json

from typer.testing import CliRunner

from contract_route_toolkit import __version__
from contract_route_toolkit.main import app


runner = CliRunner()


class TestAuditCommand:
    """Tests for `contract-route audit`."""

    def test_audit_prints_score(self, tmp_path, full_service_contract):
        contract = tmp_path / "service.txt"
        contract.write_text(full_service_contract, encoding="utf-8")

        result = runner.invoke(app, ["audit", "-c", str(contract), "-t", "service_agreement"])

        assert result.exit_code == 0
        assert "100/100" in result.output
        assert "LOW" in result.output

    def test_audit_saves_json(self, tmp_path, full_service_contract):
        contract = tmp_path / "service.txt"
        contract.write_text(full_service_contract, encoding="utf-8")
        output = tmp_path / "report.json"

        result = runner.invoke(app, [
            "audit", "-c", str(contract), "-t", "service_agreement",
            "--id", "cli-1", "-o", str(output), "-f", "json",
        ])

        assert result.exit_code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["contractId"] == "cli-1"
        assert data["fileMetadata"]["fileName"] == "service.txt"

    def test_audit_bad_file_is_critical(self, tmp_path):
        contract = tmp_path / "empty.txt"
        contract.write_text("", encoding="utf-8")

        result = runner.invoke(app, ["audit", "-c", str(contract), "-t", "maintenance"])

        assert result.exit_code == 0
        assert "CRITICAL" in result.output

    def test_audit_rejects_unknown_type(self, tmp_path):
        contract = tmp_path / "a.txt"
        contract.write_text("x", encoding="utf-8")

        result = runner.invoke(app, ["audit", "-c", str(contract), "-t", "nda"])
        assert result.exit_code != 0


class TestOtherCommands:
    """Tests for the informational commands."""

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_list_rules(self):
        result = runner.invoke(app, ["list-rules"])

        assert result.exit_code == 0
        assert "数据安全" in result.output
        assert "用户体验" in result.output
        assert "排他性条款审查" in result.output

    def test_list_rules_for_type(self):
        result = runner.invoke(app, ["list-rules", "--type", "maintenance"])

        assert result.exit_code == 0
        assert "数据安全" in result.output
        assert "用户体验" not in result.output
