"""
API error rendering.

Every error leaves the API in one of two shapes:

    {"errors": [{"field": "dose", "message": "must be between 0 and 1000"}, ...]}   (400)
    {"error": "Bag not found"}                                                       (everything else)

Field issues from input serializers are flattened into the first shape so a
client can render every problem at once.
"""
from rest_framework import exceptions
from rest_framework.settings import api_settings
from rest_framework.views import exception_handler


def flatten_issues(detail, field=None):
    """Yield ``{field, message}`` dicts from a DRF error detail structure."""
    if isinstance(detail, dict):
        for key, value in detail.items():
            nested = key if field is None else f'{field}.{key}'
            yield from flatten_issues(value, nested)
    elif isinstance(detail, (list, tuple)):
        for item in detail:
            yield from flatten_issues(item, field)
    else:
        yield {
            'field': field or api_settings.NON_FIELD_ERRORS_KEY,
            'message': str(detail),
        }


def api_exception_handler(exc, context):
    """DRF exception handler producing the API's error bodies."""
    response = exception_handler(exc, context)
    if response is None:
        # Not an API exception; Django's handler500 renders it
        return None

    if isinstance(exc, exceptions.ValidationError):
        response.data = {'errors': list(flatten_issues(exc.detail))}
        return response

    detail = exc.detail
    if isinstance(detail, dict):
        detail = detail.get('detail', detail)
    response.data = {'error': str(detail)}
    return response
