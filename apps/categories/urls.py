from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'categories'

router = DefaultRouter()
router.register(r'', views.CategoryViewSet, basename='category')

urlpatterns = [
    # GET    /api/categories/          - List categories (?kind=income|expense)
    # POST   /api/categories/          - Create custom category
    # GET    /api/categories/{id}/     - Get category
    # PATCH  /api/categories/{id}/     - Update category
    # DELETE /api/categories/{id}/     - Delete custom category
    path('', include(router.urls)),
]
