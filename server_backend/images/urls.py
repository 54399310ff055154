from django.urls import path
from .views import image_list, image_detail, image_single_info

urlpatterns = [
    path('', image_list, name='image-list'),
    path('<int:image_id>/', image_detail, name='image-detail'),
    path('<int:image_id>/info/', image_single_info, name='image-info'),
]
