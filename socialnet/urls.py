import re

from django.conf import settings
from django.urls import include, path, re_path

from apps.avatars.views import serve_avatar

urlpatterns = [
    path("", include("apps.avatars.urls")),
]

if settings.SERVE_UPLOADS:
    urlpatterns += [
        re_path(
            r"^%s/(?P<path>.+)$" % re.escape(settings.AVATAR_URL.strip("/")),
            serve_avatar,
            name="avatar-file",
        ),
    ]
