# --------------------------------------------------
# 0.  Drop-in env loader
# --------------------------------------------------
import os
from dotenv import load_dotenv
load_dotenv()          # reads .env from same dir

# --------------------------------------------------
# 1.  Core Django
# --------------------------------------------------
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent
SECRET_KEY                  = os.getenv('SECRET_KEY', 'django-insecure-t1r8q$0v!n4k#c2m7^w6e@9z5x&p3ja)u-d_gfhsyb(l+o')
DEBUG                       = os.getenv('DEBUG', 'True').lower() in ('true', '1', 'yes')
ALLOWED_HOSTS               = [h.strip() for h in os.getenv('ALLOWED_HOSTS', '*').split(',') if h.strip()]

# --------------------------------------------------
# 2.  Installed Apps
# --------------------------------------------------
DJANGO_APPS = [
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.staticfiles',
]
THIRD_PARTY_APPS = [
    'rest_framework',
    'corsheaders',
]
LOCAL_APPS = [
    'apps.avatars.apps.AvatarsConfig',
]
INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + LOCAL_APPS

# --------------------------------------------------
# 3.  Middleware
# --------------------------------------------------
MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]
ROOT_URLCONF = 'socialnet.urls'

# --------------------------------------------------
# 4.  Templates
# --------------------------------------------------
TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
            ],
        },
    },
]

# --------------------------------------------------
# 5.  ASGI
# --------------------------------------------------
ASGI_APPLICATION = 'socialnet.asgi.application'

# --------------------------------------------------
# 6.  Database
# --------------------------------------------------
# Avatars are plain files under the upload root, nothing is stored in a
# database. An empty mapping makes Django use its dummy backend.
DATABASES = {}

# --------------------------------------------------
# 7.  Avatar uploads
# --------------------------------------------------
AVATAR_UPLOAD_ROOT = Path(os.getenv('AVATAR_UPLOAD_ROOT', BASE_DIR / 'public' / 'uploads' / 'avatars'))
AVATAR_URL         = os.getenv('AVATAR_URL', '/uploads/avatars/')
SERVE_UPLOADS      = os.getenv('SERVE_UPLOADS', 'True').lower() in ('true', '1', 'yes')

# Every upload is spooled to a temporary file, the handler then moves it
# into AVATAR_UPLOAD_ROOT.
FILE_UPLOAD_HANDLERS = [
    'django.core.files.uploadhandler.TemporaryFileUploadHandler',
]
FILE_UPLOAD_TEMP_DIR    = os.getenv('FILE_UPLOAD_TEMP_DIR') or None
FILE_UPLOAD_PERMISSIONS = 0o644

# --------------------------------------------------
# 8.  Django REST framework
# --------------------------------------------------
REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.MultiPartParser',
        'rest_framework.parsers.FormParser',
    ],
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [],
    'EXCEPTION_HANDLER': 'apps.avatars.utils.api_exception_handler',
}

# --------------------------------------------------
# 9.  Internationalization
# --------------------------------------------------
LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# --------------------------------------------------
# 10.  Static
# --------------------------------------------------
STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

# --------------------------------------------------
# 11.  CORS
# --------------------------------------------------
CORS_ALLOW_ALL_ORIGINS = os.getenv('CORS_ALLOW_ALL_ORIGINS', 'True').lower() in ('true', '1', 'yes')
CORS_ALLOW_CREDENTIALS = True

# --------------------------------------------------
# 12.  Logging
# --------------------------------------------------
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {name} {process:d} {thread:d} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
        'apps': {
            'level': LOG_LEVEL,
        },
    },
}
