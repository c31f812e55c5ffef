"""
Tests for file-level contract audits.
"""

import pytest

from contract_route_toolkit.compliance import FileAuditor, audit_contract_file
from contract_route_toolkit.config import get_config
from contract_route_toolkit.models import (
    CheckStatus,
    ContractType,
    FileAuditResult,
    RiskLevel,
)


def assert_failure_result(result: FileAuditResult):
    """Check the fixed shape of a failed file audit."""
    assert result.overall_risk_level == RiskLevel.CRITICAL
    assert result.compliance_score == 0
    assert len(result.compliance_checks) == 1

    check = result.compliance_checks[0]
    assert check.category == "文件处理"
    assert check.requirement == "文件解析"
    assert check.status == CheckStatus.FAIL

    assert result.summary.startswith("文件审核失败: ")
    assert result.critical_issues == ["文件处理: 文件解析失败"]
    assert len(result.recommendations) == 3
    assert result.file_metadata.word_count == 0


class TestFileAuditSuccess:
    """Tests for files that extract and audit cleanly."""

    def test_text_file(self, full_service_contract):
        data = full_service_contract.encode("utf-8")
        result = FileAuditor().audit_file(
            data,
            "service.txt",
            ContractType.SERVICE_AGREEMENT,
            contract_id="f-1",
        )

        assert isinstance(result, FileAuditResult)
        assert result.contract_id == "f-1"
        assert result.compliance_score == 100
        assert result.overall_risk_level == RiskLevel.LOW
        assert result.file_metadata.file_name == "service.txt"
        assert result.file_metadata.file_type == "text/plain"
        assert result.file_metadata.file_size == len(data)
        assert result.file_metadata.word_count > 0
        assert result.extracted_content is None

    def test_include_extracted_content(self, full_service_contract):
        result = audit_contract_file(
            full_service_contract.encode("utf-8"),
            "service.txt",
            ContractType.SERVICE_AGREEMENT,
            include_extracted_content=True,
        )

        assert "知识产权归甲方所有" in result.extracted_content
        # extracted text is whitespace-normalized
        assert "\n" not in result.extracted_content

    def test_pdf_file(self, pdf_factory):
        data = pdf_factory(
            "Data protection, intellectual property, SLA uptime and liability are agreed."
        )
        result = audit_contract_file(data, "contract.pdf", ContractType.MAINTENANCE)

        assert result.compliance_score == 100
        assert result.file_metadata.page_count == 1

    def test_file_matches_text_audit(self, auditor, bare_contract):
        """A file audit scores exactly like the same text audited directly."""
        content = bare_contract * 10
        direct = auditor.audit(content, ContractType.VISUALIZATION_DASHBOARD)
        wrapped = FileAuditor(auditor=auditor).audit_file(
            content.encode("utf-8"), "bare.txt", ContractType.VISUALIZATION_DASHBOARD
        )

        assert wrapped.compliance_score == direct.compliance_score
        assert wrapped.critical_issues == direct.critical_issues
        assert wrapped.recommendations == direct.recommendations


class TestFileAuditFailure:
    """Tests for the synthetic critical result."""

    def test_unsupported_type(self):
        result = audit_contract_file(
            b"MZ binary content" * 10,
            "setup.exe",
            ContractType.SOFTWARE_LICENSE,
            mime_type="application/x-msdownload",
            include_extracted_content=True,
        )

        assert_failure_result(result)
        assert result.file_metadata.file_type == "application/x-msdownload"
        assert result.file_metadata.file_size == 170
        assert result.extracted_content == ""

    def test_unknown_mime_reported(self):
        result = audit_contract_file(b"\x00\x01", "blob", ContractType.MAINTENANCE)

        assert_failure_result(result)
        assert result.file_metadata.file_type == "unknown"
        assert result.extracted_content is None

    def test_oversize_file(self):
        data = b"a" * (10 * 1024 * 1024 + 1)
        result = audit_contract_file(data, "big.txt", ContractType.MAINTENANCE)

        assert_failure_result(result)
        assert "文件大小超过限制" in result.summary
        assert result.file_metadata.file_size == len(data)

    def test_empty_text_file(self):
        result = audit_contract_file(b"   ", "empty.txt", ContractType.MAINTENANCE)
        assert_failure_result(result)

    def test_docx_rejected_by_default(self, docx_factory):
        data = docx_factory(["数据保护 知识产权 SLA 责任限制"] * 5)
        result = audit_contract_file(data, "contract.docx", ContractType.MAINTENANCE)
        assert_failure_result(result)

    def test_docx_accepted_when_enabled(self, docx_factory):
        config = get_config()
        config.file_audit.allow_docx = True
        data = docx_factory(["数据保护 知识产权 SLA 责任限制"] * 5)

        result = FileAuditor(config=config).audit_file(
            data, "contract.docx", ContractType.MAINTENANCE
        )

        assert result.compliance_score == 100

    def test_auditor_errors_are_contained(self, full_service_contract):
        """Exceptions raised during the audit step also become failures."""

        class BrokenAuditor:
            def audit(self, *args, **kwargs):
                raise RuntimeError("rule engine unavailable")

        result = FileAuditor(auditor=BrokenAuditor()).audit_file(
            full_service_contract.encode("utf-8"),
            "service.txt",
            ContractType.SERVICE_AGREEMENT,
            contract_id="f-9",
        )

        assert_failure_result(result)
        assert result.contract_id == "f-9"
        assert result.summary == "文件审核失败: rule engine unavailable"

    def test_missing_file_name(self, full_service_contract):
        result = audit_contract_file(
            full_service_contract.encode("utf-8"), None, ContractType.MAINTENANCE
        )

        assert_failure_result(result)
        assert result.file_metadata.file_name == ""

    def test_failure_is_logged(self, caplog):
        with caplog.at_level("ERROR"):
            audit_contract_file(b"", "nothing.exe", ContractType.MAINTENANCE)
        assert "nothing.exe" in caplog.text

    def test_unknown_contract_type_raises(self):
        with pytest.raises(ValueError):
            audit_contract_file(b"text", "a.txt", "nda")
