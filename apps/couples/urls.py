from django.urls import path
from . import views

app_name = 'couples'

urlpatterns = [
    # Current couple
    path('me/', views.my_couple, name='my-couple'),
    path('me/settings/', views.update_settings, name='update-settings'),

    # Invitations
    path('invitations/', views.invitations, name='invitations'),
    path('invitations/accept/', views.accept, name='accept-invitation'),
    path('invitations/<str:token>/', views.invitation_preview, name='invitation-preview'),
]
