import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class ReferralError(APIException):
    """Base class for errors raised by the registries and the suggestion engine."""


class ValidationError(ReferralError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid input.'
    default_code = 'validation_error'

    def __init__(self, errors):
        # Keep the per-field messages untouched; DRF would wrap each in ErrorDetail
        super().__init__(detail='Invalid input.', code=self.default_code)
        self.errors = errors


class NotFoundError(ReferralError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Not found.'
    default_code = 'not_found'

    def __init__(self, resource: str, pk=None):
        message = f'{resource} not found' if pk is None else f'{resource} {pk} not found'
        super().__init__(detail=message, code=self.default_code)
        self.resource = resource


class UnsupportedRegionError(ReferralError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_detail = 'We are still waiting to expand to your location.'
    default_code = 'unsupported_region'


class NoMatchError(ReferralError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "There isn't any doctor present at your location for your symptom."
    default_code = 'no_match'


def _error_code(exc) -> str:
    return getattr(exc, 'default_code', None) or 'api_error'


def api_exception_handler(exc, context):
    if isinstance(exc, ValidationError):
        return Response(
            {'ok': False, 'error': {'code': exc.default_code, 'message': exc.errors}},
            status=exc.status_code,
        )
    resp = drf_exception_handler(exc, context)
    if resp is None:
        logger.exception('unhandled error in %s', context.get('view').__class__.__name__)
        return Response({'ok': False, 'error': {'code': 'server_error', 'message': str(exc)}}, status=500)
    # normalize response
    detail = None
    if isinstance(resp.data, dict):
        detail = resp.data.get('detail') or resp.data
    else:
        detail = resp.data
    return Response({'ok': False, 'error': {'code': _error_code(exc), 'message': detail}},
                    status=resp.status_code, headers=_passthrough_headers(resp))


def _passthrough_headers(resp) -> dict:
    # Keep Allow / Retry-After set by DRF for 405 and 429 responses
    return {k: resp[k] for k in ('Allow', 'Retry-After') if resp.has_header(k)}
