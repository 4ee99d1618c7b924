from django.apps import AppConfig


class AvatarsConfig(AppConfig):
    name = 'apps.avatars'
    verbose_name = 'Avatars'
