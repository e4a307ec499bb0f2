# File: nss_portal/services/qr_code.py
import base64
import logging
from io import BytesIO
import qrcode
from qrcode.image.pure import PyPNGImage
from nss_portal.core.config import settings
from nss_portal.schemas.user import User

logger = logging.getLogger(__name__)


def portfolio_url(user: User, base_url: str = None) -> str:
    return f"{(base_url or settings.PORTFOLIO_BASE_URL).rstrip('/')}/{user.roll_number}"


def generate_qr_code(data: str) -> str:
    """
    Generate QR code image as base64 string.

    Args:
        data: Text or URL to encode

    Returns:
        PNG data URL ("data:image/png;base64,...")
    """
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=6,
        border=2,
        image_factory=PyPNGImage,
    )

    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image()
    buffer = BytesIO()
    img.save(buffer)
    buffer.seek(0)

    img_base64 = base64.b64encode(buffer.read()).decode("utf-8")
    return f"data:image/png;base64,{img_base64}"


def generate_portfolio_qr(user: User, base_url: str = None) -> str:
    url = portfolio_url(user, base_url)
    logger.debug(f"Generating portfolio QR code for {user.roll_number}: {url}")
    return generate_qr_code(url)
