"""
Shared fixtures for the Contract Route Toolkit tests.
"""

import pytest

from contract_route_toolkit.compliance import ComplianceAuditor
from contract_route_toolkit.models import Location
from contract_route_toolkit.routing import CityCatalog, RoutePlanner
from contract_route_toolkit.tools import StaticGeocoder


# =============================================================================
# Contract Texts
# =============================================================================

@pytest.fixture
def full_service_contract():
    """Service agreement that satisfies every base rule."""
    return """
    技术服务合同

    甲方：某某科技有限公司
    乙方：某某数据服务有限公司

    第一条 服务内容
    乙方为甲方提供系统运维服务，服务期限为一年。

    第二条 数据保护
    乙方应对甲方数据采取加密存储和传输措施，保障用户隐私。

    第三条 知识产权
    本合同项下产生的全部成果的知识产权归甲方所有。

    第四条 服务等级
    乙方保证系统可用性不低于99.9%，SLA 违约按月度服务费折算。

    第五条 责任限制
    任何一方的累计赔偿责任以合同总金额为限。
    """


@pytest.fixture
def bare_contract():
    """Contract text that satisfies no rule."""
    return "本合同仅约定服务范围"


@pytest.fixture
def auditor():
    """Auditor with the bundled rule battery."""
    return ComplianceAuditor()


# =============================================================================
# Route Fixtures
# =============================================================================

CITY_LOCATIONS = {
    "Paris": Location(name="Paris", latitude=48.8566, longitude=2.3522,
                      country="France", region="Île-de-France"),
    "Rome": Location(name="Rome", latitude=41.9028, longitude=12.4964,
                     country="Italy", region="Lazio"),
    "London": Location(name="London", latitude=51.5074, longitude=-0.1278,
                       country="United Kingdom", region="England"),
    "Beijing": Location(name="Beijing", latitude=39.9042, longitude=116.4074,
                        country="China", region="Beijing"),
    "Lyon": Location(name="Lyon", latitude=45.7640, longitude=4.8357,
                     country="France", region="Auvergne-Rhône-Alpes"),
}


@pytest.fixture
def locations():
    """Known city locations keyed by name."""
    return dict(CITY_LOCATIONS)


@pytest.fixture
def geocoder():
    """Offline geocoder over the known cities."""
    return StaticGeocoder(CITY_LOCATIONS)


@pytest.fixture
def catalog():
    """Bundled city catalog."""
    return CityCatalog.from_config()


@pytest.fixture
def planner(geocoder, catalog):
    """Route planner backed by the offline geocoder."""
    return RoutePlanner(geocoder, catalog=catalog)


# =============================================================================
# File Helpers
# =============================================================================

def make_pdf(text: str) -> bytes:
    """
    Build a one-page PDF showing a single line of ASCII text.

    Object offsets are computed so the cross-reference table is exact.
    """
    stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Resources << /Font << /F1 5 0 R >> >> /Contents 4 0 R >>",
        b"<< /Length " + str(len(stream)).encode() + b" >>\nstream\n" + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, 1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_offset = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_offset}\n%%EOF\n"
    ).encode()

    return bytes(out)


def make_docx(paragraphs: list[str]) -> bytes:
    """Build a DOCX document with the given paragraphs."""
    import io

    import docx

    document = docx.Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)

    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def pdf_factory():
    """Factory building single-page text PDFs."""
    return make_pdf


@pytest.fixture
def docx_factory():
    """Factory building DOCX documents."""
    return make_docx
