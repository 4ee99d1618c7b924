from rest_framework.views import exception_handler


def api_exception_handler(exc, context):
    """Render DRF errors as ``{"error": <message>}`` like the upload endpoint does."""
    response = exception_handler(exc, context)
    if response is None:
        return None
    detail = response.data.get("detail") if isinstance(response.data, dict) else None
    response.data = {"error": str(detail) if detail is not None else response.data}
    return response
