"""
File-level contract audits.

Wraps document extraction and the compliance auditor so that a raw
uploaded file always produces a well-formed result. Any failure along
the way becomes a synthetic critical result instead of an exception.
"""

import logging
from typing import Optional

from contract_route_toolkit.compliance.engine import ComplianceAuditor, generate_contract_id
from contract_route_toolkit.config.settings import ToolkitConfig, get_config
from contract_route_toolkit.models.schemas import (
    CheckStatus,
    ComplianceCheckItem,
    ContractType,
    FileAuditResult,
    FileMetadata,
    RiskLevel,
)
from contract_route_toolkit.tools.document_loader import (
    DocumentLoader,
    DocumentParseError,
    validate_file_type,
)

logger = logging.getLogger(__name__)


FAILURE_RECOMMENDATIONS = [
    "请检查文件格式是否正确（支持PDF、TXT）",
    "确保文件未损坏且包含文本内容",
    "如果是DOCX文件，请转换为PDF或TXT格式",
]


class FileAuditor:
    """
    Audits contract files end to end.

    Example:
        >>> auditor = FileAuditor()
        >>> with open("contract.pdf", "rb") as f:
        ...     result = auditor.audit_file(f.read(), "contract.pdf", ContractType.MAINTENANCE)
    """

    def __init__(
        self,
        config: Optional[ToolkitConfig] = None,
        auditor: Optional[ComplianceAuditor] = None,
        loader: Optional[DocumentLoader] = None
    ):
        """
        Initialize the file auditor.

        Args:
            config: Toolkit configuration (defaults from environment)
            auditor: Compliance auditor for the extracted text
            loader: Document loader for extraction
        """
        self.config = config or get_config()
        self.auditor = auditor or ComplianceAuditor(config=self.config)
        self.loader = loader or DocumentLoader.from_config(self.config.file_audit)

    def audit_file(
        self,
        data: bytes,
        file_name: str,
        contract_type: ContractType,
        contract_id: Optional[str] = None,
        company_name: Optional[str] = None,
        mime_type: Optional[str] = None,
        include_extracted_content: bool = False
    ) -> FileAuditResult:
        """
        Validate, extract and audit a contract file.

        Args:
            data: Raw file content
            file_name: Original file name
            contract_type: Type of contract
            contract_id: Optional identifier
            company_name: Optional company name
            mime_type: Declared MIME type, if known
            include_extracted_content: Attach the extracted text to the result

        Returns:
            FileAuditResult; a synthetic critical result if anything failed

        Raises:
            ValueError: If contract_type is not a known contract type
        """
        contract_type = ContractType(contract_type)
        contract_id = contract_id or generate_contract_id()

        try:
            if not validate_file_type(file_name, mime_type, allow_docx=self.loader.allow_docx):
                raise DocumentParseError(
                    f"不支持的文件类型: {mime_type or file_name}。支持的格式: PDF, TXT"
                )

            content, metadata = self.loader.parse(data, file_name, mime_type)

            result = self.auditor.audit(
                content,
                contract_type,
                contract_id=contract_id,
                company_name=company_name,
            )

            return FileAuditResult(
                **dict(result),
                file_metadata=metadata,
                extracted_content=content if include_extracted_content else None,
            )

        except Exception as e:
            logger.error("File audit failed for %s: %s", file_name, e)
            return self._failure_result(
                e, data, file_name, contract_type, contract_id,
                mime_type, include_extracted_content,
            )

    @staticmethod
    def _failure_result(
        error: Exception,
        data: bytes,
        file_name: str,
        contract_type: ContractType,
        contract_id: str,
        mime_type: Optional[str],
        include_extracted_content: bool
    ) -> FileAuditResult:
        """Build the critical result reported for a failed file audit."""
        return FileAuditResult(
            contract_id=contract_id,
            contract_type=contract_type,
            overall_risk_level=RiskLevel.CRITICAL,
            compliance_score=0,
            compliance_checks=[
                ComplianceCheckItem(
                    category="文件处理",
                    requirement="文件解析",
                    status=CheckStatus.FAIL,
                    description="文件解析或审核过程中发生错误",
                    recommendation="请检查文件格式和内容是否正确",
                )
            ],
            summary=f"文件审核失败: {error}",
            critical_issues=["文件处理: 文件解析失败"],
            recommendations=list(FAILURE_RECOMMENDATIONS),
            file_metadata=FileMetadata(
                file_name=file_name or "",
                file_type=mime_type or "unknown",
                file_size=len(data or b""),
                word_count=0,
            ),
            extracted_content="" if include_extracted_content else None,
        )


# =============================================================================
# Convenience Functions
# =============================================================================

def audit_contract_file(
    data: bytes,
    file_name: str,
    contract_type: ContractType,
    contract_id: Optional[str] = None,
    company_name: Optional[str] = None,
    mime_type: Optional[str] = None,
    include_extracted_content: bool = False
) -> FileAuditResult:
    """
    One-shot file audit with the default configuration.

    Args:
        data: Raw file content
        file_name: Original file name
        contract_type: Type of contract
        contract_id: Optional identifier
        company_name: Optional company name
        mime_type: Declared MIME type, if known
        include_extracted_content: Attach the extracted text to the result

    Returns:
        FileAuditResult
    """
    return FileAuditor().audit_file(
        data,
        file_name,
        contract_type,
        contract_id=contract_id,
        company_name=company_name,
        mime_type=mime_type,
        include_extracted_content=include_extracted_content,
    )
