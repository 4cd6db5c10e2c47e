from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'events'

router = DefaultRouter()
router.register(r'', views.CalendarEventViewSet, basename='event')

urlpatterns = [
    # GET    /api/calendar/                      - List events (?month=&year=)
    # POST   /api/calendar/                      - Create event
    # GET    /api/calendar/{id}/                 - Get event
    # PATCH  /api/calendar/{id}/                 - Update event
    # DELETE /api/calendar/{id}/                 - Delete event
    path('', include(router.urls)),
]
