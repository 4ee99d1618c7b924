from django.urls import path
from .views import AvatarUploadView, UploadTestView

urlpatterns = [
    path('api/upload-avatar', AvatarUploadView.as_view(), name='avatar-upload'),
    path('upload-test', UploadTestView.as_view(), name='upload-test'),
]
