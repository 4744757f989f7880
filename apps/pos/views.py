from rest_framework import viewsets, filters, status
from rest_framework.decorators import action
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend

from . import services
from .models import Pos
from .serializers import PosSerializer, PosNameQuerySerializer
from .services import DuplicatePosNameError, PosIdMismatchError, PosNotFoundError


class PosViewSet(viewsets.GenericViewSet):
    """Create, list, retrieve and update POS (no delete)"""
    queryset = Pos.objects.all()  # Base queryset for router
    serializer_class = PosSerializer
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ['type', 'campus', 'city']
    search_fields = ['name', 'description', 'city']
    ordering_fields = ['id', 'name', 'created_at', 'updated_at']
    ordering = ['id']
    lookup_value_regex = r'\d+'
    http_method_names = ['get', 'post', 'put', 'head', 'options']

    def get_queryset(self):
        return services.list_pos()

    def list(self, request):
        """List all POS, in insertion order unless ?ordering= is given"""
        queryset = self.filter_queryset(self.get_queryset())
        serializer = self.get_serializer(queryset, many=True)
        return Response(serializer.data)

    def retrieve(self, request, pk=None):
        """Get a single POS by id"""
        try:
            pos = services.get_pos(pk)
        except PosNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(self.get_serializer(pos).data)

    def create(self, request):
        """Create one POS (JSON object) or several (JSON array)"""
        many = isinstance(request.data, list)
        serializer = self.get_serializer(data=request.data, many=many)
        serializer.is_valid(raise_exception=True)

        try:
            if many:
                created = services.create_pos_batch(serializer.validated_data)
            else:
                created = services.create_pos(serializer.validated_data)
        except DuplicatePosNameError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        output_serializer = self.get_serializer(created, many=many)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        """Replace all mutable fields of a POS"""
        body_id = request.data.get('id') if isinstance(request.data, dict) else None
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            pos = services.update_pos(pk, serializer.validated_data, body_id=body_id)
        except PosIdMismatchError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except PosNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except DuplicatePosNameError as e:
            return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

        return Response(self.get_serializer(pos).data, status=status.HTTP_200_OK)

    @action(detail=False, methods=['get'], url_path='filter')
    def by_name(self, request):
        """Get the POS with the exact name given in ?name="""
        query = PosNameQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        try:
            pos = services.get_pos_by_name(query.validated_data['name'])
        except PosNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(self.get_serializer(pos).data)
