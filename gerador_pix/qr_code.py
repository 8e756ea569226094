from gerador_pix.error import ErroQrCode, PayloadPixInvalido
from gerador_pix.log import configurar_logging
import io
import base64
import logging
import qrcode


configurar_logging()
logger = logging.getLogger(__name__)


def gerar_imagem_qr(payload: str, box_size: int = 10):
    if not payload:
        logger.warning('Payload PIX vazio ao gerar QR Code.')
        raise PayloadPixInvalido('Payload PIX vazio')

    try:
        qr = qrcode.QRCode(
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=box_size,
            border=1
        )
        qr.add_data(payload)
        qr.make(fit=True)
        return qr.make_image(fill_color='black', back_color='white')

    except (ValueError, TypeError, qrcode.exceptions.DataOverflowError) as erro:
        logger.error(f'Erro ao gerar QR Code PIX: {str(erro)}')
        raise ErroQrCode('Não foi possível gerar o QR Code PIX') from erro


def gerar_qr_code_png(payload: str, box_size: int = 10) -> bytes:
    img = gerar_imagem_qr(payload, box_size)

    buffered = io.BytesIO()
    img.save(buffered, format='PNG')
    return buffered.getvalue()


def gerar_qr_code_base64(payload: str, box_size: int = 10) -> str:
    png = gerar_qr_code_png(payload, box_size)
    return base64.b64encode(png).decode('ascii')


def gerar_qr_code_data_url(payload: str, box_size: int = 10) -> str:
    return f"data:image/png;base64,{gerar_qr_code_base64(payload, box_size)}"
