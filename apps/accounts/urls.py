from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # Authentication
    path('register/', views.register, name='register'),
    path('login/', views.login, name='login'),

    # Current account
    path('me/', views.get_current_user, name='current-user'),
    path('me/settings/', views.update_settings, name='update-settings'),

    # Email verification
    path('verify-email/', views.verify_email, name='verify-email'),
]
