from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .serializers import (
    CategorySerializer,
    CategoryWriteSerializer,
    CategoryQuerySerializer,
)

from apps.categories.services import (
    get_categories_for_user,
    create_category,
    update_category,
    delete_category,
    # Exceptions
    CategoryNotFoundError,
    DuplicateCategoryError,
    DefaultCategoryProtectedError,
)


class CategoryViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Category CRUD operations.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Categories of the user's scope (couple or personal), ?kind= filter
    create: Create a custom category
    retrieve: Get a category
    update: Replace a category's fields
    partial_update: Change some of a category's fields
    destroy: Delete a custom category (defaults are protected)
    """

    serializer_class = CategorySerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        """Return only categories in the user's scope."""
        return get_categories_for_user(user=self.request.user)

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return CategoryWriteSerializer
        return CategorySerializer

    @extend_schema(
        parameters=[
            OpenApiParameter('kind', OpenApiTypes.STR, description="Filter by 'income' or 'expense'"),
        ],
    )
    def list(self, request, *args, **kwargs):
        query_serializer = CategoryQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)

        categories = get_categories_for_user(
            user=request.user,
            kind=query_serializer.validated_data.get('kind')
        )
        return Response(CategorySerializer(categories, many=True).data)

    @extend_schema(request=CategoryWriteSerializer, responses={201: CategorySerializer})
    def create(self, request, *args, **kwargs):
        serializer = CategoryWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            category = create_category(user=request.user, **serializer.validated_data)
        except DuplicateCategoryError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(CategorySerializer(category).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=CategoryWriteSerializer, responses={200: CategorySerializer})
    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = CategoryWriteSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            category = update_category(
                category_id=self.kwargs['pk'],
                user=request.user,
                **serializer.validated_data
            )
        except CategoryNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except DuplicateCategoryError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(CategorySerializer(category).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_category(category_id=self.kwargs['pk'], user=request.user)
        except CategoryNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except DefaultCategoryProtectedError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(status=status.HTTP_204_NO_CONTENT)
