from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'goals'

router = DefaultRouter()
router.register(r'', views.SavingsGoalViewSet, basename='goal')

urlpatterns = [
    # GET    /api/goals/                       - List goals
    # POST   /api/goals/                       - Create goal
    # GET    /api/goals/{id}/                  - Get goal
    # PATCH  /api/goals/{id}/                  - Update goal
    # DELETE /api/goals/{id}/                  - Delete goal
    # GET    /api/goals/{id}/contributions/    - List contributions
    # POST   /api/goals/{id}/contributions/    - Add contribution
    path('', include(router.urls)),
]
