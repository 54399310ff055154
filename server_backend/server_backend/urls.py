# gallery/server_backend/server_backend/urls.py
from django.urls import path, include

urlpatterns = [
    path('api/images/', include('images.urls')),
    path('api/accounts/', include('accounts.urls')),
]
