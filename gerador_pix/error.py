from gerador_pix.log import configurar_logging
import logging


configurar_logging()
logger = logging.getLogger(__name__)


class ErroPix(ValueError):
    '''
    Base de todos os erros do gerador de payload PIX.
    '''
    mensagem = 'Erro inesperado no payload PIX!'


class CampoEMVInvalido(ErroPix):
    mensagem = 'Campo EMV inválido!'


class ValorPixInvalido(ErroPix):
    mensagem = 'Valor do PIX inválido!'


class ChavePixInvalida(ErroPix):
    mensagem = 'Chave PIX inválida!'


class PayloadPixInvalido(ErroPix):
    mensagem = 'Payload PIX inválido!'


class ErroQrCode(ErroPix):
    mensagem = 'Erro ao gerar imagem do QR Code PIX!'


def tratamento_erro_pix(erro):
    if isinstance(erro, CampoEMVInvalido):
        logger.warning(f'Campo EMV inválido: {str(erro)}')
        return {'erro': CampoEMVInvalido.mensagem, 'detalhe': str(erro)}

    if isinstance(erro, ValorPixInvalido):
        logger.warning(f'Valor do PIX inválido: {str(erro)}')
        return {'erro': ValorPixInvalido.mensagem, 'detalhe': str(erro)}

    if isinstance(erro, ChavePixInvalida):
        logger.warning(f'Chave PIX inválida: {str(erro)}')
        return {'erro': ChavePixInvalida.mensagem, 'detalhe': str(erro)}

    if isinstance(erro, PayloadPixInvalido):
        logger.warning(f'Payload PIX inválido: {str(erro)}')
        return {'erro': PayloadPixInvalido.mensagem, 'detalhe': str(erro)}

    if isinstance(erro, ErroQrCode):
        logger.error(f'Erro ao gerar QR Code PIX: {str(erro)}')
        return {'erro': ErroQrCode.mensagem, 'detalhe': str(erro)}

    if isinstance(erro, ErroPix):
        logger.error(f'Erro no payload PIX: {str(erro)}')
        return {'erro': ErroPix.mensagem, 'detalhe': str(erro)}

    logger.error(f'Erro inesperado ao processar PIX: {str(erro)}')
    return {'erro': 'Erro inesperado ao processar PIX!'}
