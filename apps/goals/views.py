from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    ContributionCreateSerializer,
    GoalContributionSerializer,
    GoalCreateSerializer,
    GoalWriteSerializer,
    SavingsGoalSerializer,
)

from apps.goals.services import (
    add_contribution,
    create_goal,
    delete_goal,
    get_goal,
    get_goals_for_user,
    update_goal,
    # Exceptions
    GoalAlreadyCompletedError,
    GoalNotFoundError,
    InvalidGoalDataError,
)


class SavingsGoalViewSet(viewsets.ModelViewSet):
    """
    ViewSet for savings goals.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Goals of the user's couple (or personal goals)
    create: Create a goal
    retrieve: Get a goal
    update: Replace a goal's fields
    partial_update: Change some of a goal's fields
    destroy: Delete a goal
    contributions: List (GET) or add (POST) contributions
    """

    serializer_class = SavingsGoalSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        """Return only goals in the user's scope."""
        return get_goals_for_user(user=self.request.user)

    def get_serializer_class(self):
        if self.action == 'create':
            return GoalCreateSerializer
        if self.action in ['update', 'partial_update']:
            return GoalWriteSerializer
        return SavingsGoalSerializer

    @extend_schema(request=GoalCreateSerializer, responses={201: SavingsGoalSerializer})
    def create(self, request, *args, **kwargs):
        serializer = GoalCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            goal = create_goal(user=request.user, **serializer.validated_data)
        except InvalidGoalDataError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(SavingsGoalSerializer(goal).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=GoalWriteSerializer, responses={200: SavingsGoalSerializer})
    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = GoalWriteSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            goal = update_goal(
                goal_id=self.kwargs['pk'],
                user=request.user,
                **serializer.validated_data
            )
        except GoalNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidGoalDataError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(SavingsGoalSerializer(goal).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_goal(goal_id=self.kwargs['pk'], user=request.user)
        except GoalNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        methods=['GET'],
        responses={200: GoalContributionSerializer(many=True)},
    )
    @extend_schema(
        methods=['POST'],
        request=ContributionCreateSerializer,
        responses={201: GoalContributionSerializer},
    )
    @action(detail=True, methods=['get', 'post'])
    def contributions(self, request, pk=None):
        """List or add contributions to a goal."""
        if request.method == 'GET':
            try:
                goal = get_goal(goal_id=pk, user=request.user)
            except GoalNotFoundError as e:
                return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

            contributions = goal.contributions.select_related('user')
            return Response(GoalContributionSerializer(contributions, many=True).data)

        serializer = ContributionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            contribution = add_contribution(
                goal_id=pk,
                user=request.user,
                **serializer.validated_data
            )
        except GoalNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (GoalAlreadyCompletedError, InvalidGoalDataError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(
            GoalContributionSerializer(contribution).data,
            status=status.HTTP_201_CREATED
        )
