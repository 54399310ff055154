# accounts/urls.py
from django.urls import path
from .views import whoami, set_name

urlpatterns = [
    path('whoami/', whoami, name='whoami'),
    path('name/', set_name, name='set_name'),
]
