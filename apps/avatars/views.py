import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from django.views.generic import TemplateView
from django.views.static import serve
from rest_framework import status
from rest_framework.exceptions import ParseError
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from .services import AvatarStorageError, resolve_avatar_upload, store_avatar

logger = logging.getLogger(__name__)


class AvatarUploadView(APIView):
    """
    POST /api/upload-avatar

    Stores the file sent under the ``avatar`` field and answers with
    ``{"imageUrl": "/uploads/avatars/<millis>-<filename>"}``.
    """
    authentication_classes = []
    permission_classes = []
    parser_classes = [MultiPartParser, FormParser]
    http_method_names = ['post']

    def post(self, request):
        try:
            files = request.FILES
        except ParseError as e:
            logger.error("Error parsing form: %s", e.detail)
            return Response(
                {"error": "Error parsing form data."},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        try:
            avatar_file = resolve_avatar_upload(files)
        except ValidationError as e:
            return Response(
                {"error": e.message},
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            image_url = store_avatar(avatar_file)
        except AvatarStorageError:
            return Response(
                {"error": "Error saving uploaded file."},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        return Response({"imageUrl": image_url}, status=status.HTTP_200_OK)

    def http_method_not_allowed(self, request, *args, **kwargs):
        # finalize_response() adds the Allow header from http_method_names
        return Response(
            {"error": "Method not allowed"},
            status=status.HTTP_405_METHOD_NOT_ALLOWED
        )


class UploadTestView(TemplateView):
    template_name = "avatars/upload_test.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["upload_field"] = "avatar"
        return context


def serve_avatar(request, path):
    """Serve a stored avatar straight from the upload root."""
    return serve(request, path, document_root=settings.AVATAR_UPLOAD_ROOT)
