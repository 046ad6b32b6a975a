# apps/patients/api.py
from uuid import UUID

from django.conf import settings
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from drf_spectacular.utils import OpenApiResponse, extend_schema, extend_schema_view

from .examples import build_example_filter, decode_example
from .models import Patient
from .pagination import PAGINATION_HEADER, PageRequest
from .serializers import PatientSerializer
from .schemas import (
    CreatePatientExample,
    ExampleParameters,
    PageParameters,
    PagedPatientsResponse,
    PaginationHeader,
    PatchPatientExample,
    ReplacePatientExample,
)
from .services import PatientService, not_found


@extend_schema_view(
    list=extend_schema(
        summary="List patients (paginated)",
        description=(
            "Zero-based `page` and `size` query parameters. Paging metadata is returned in the "
            "`X-Meta-Pagination` response header."
        ),
        parameters=[*PageParameters, PaginationHeader],
        responses={200: PagedPatientsResponse},
    ),
    retrieve=extend_schema(
        summary="Get patient",
        responses={200: PatientSerializer, 404: OpenApiResponse(description="Not found")},
    ),
    create=extend_schema(
        summary="Create patient",
        description="The id is assigned by the server; any id in the body is ignored.",
        examples=[CreatePatientExample],
        responses={201: PatientSerializer, 400: OpenApiResponse(description="Invalid payload")},
    ),
    update=extend_schema(
        summary="Replace patient",
        description="Replace every field. Omitted or null fields are cleared.",
        examples=[ReplacePatientExample],
        responses={200: PatientSerializer, 404: OpenApiResponse(description="Not found")},
    ),
    partial_update=extend_schema(
        summary="Update patient (partial)",
        description="Apply only the fields present (and non-null) in the body.",
        examples=[PatchPatientExample],
        responses={200: PatientSerializer, 404: OpenApiResponse(description="Not found")},
    ),
    destroy=extend_schema(
        summary="Delete patient",
        description="Idempotent: deleting a missing patient also returns 204.",
        responses={204: None},
    ),
)
class PatientViewSet(viewsets.GenericViewSet):
    """
    CRUD plus query-by-example for the patient resource.
    Writes go through ``PatientService`` so PUT and PATCH share the merge rules.
    """
    queryset = Patient.objects.all()
    serializer_class = PatientSerializer
    pagination_class = None

    # ---- Helpers -------------------------------------------------------------

    def get_service(self) -> PatientService:
        return PatientService(self.get_queryset())

    def _pk(self) -> UUID:
        raw = self.kwargs.get(self.lookup_url_kwarg or self.lookup_field)
        try:
            return UUID(str(raw))
        except ValueError:
            raise not_found(raw) from None

    def _decode_body(self, partial: bool) -> Patient:
        serializer = self.get_serializer(data=self.request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        return Patient(**serializer.validated_data)

    def _paged_response(self, page) -> Response:
        metadata = page.metadata()
        if not page.has_content and settings.PATIENTS_EMPTY_PAGE_NOT_FOUND:
            exc = not_found()
            resp = self.handle_exception(exc)
        else:
            resp = Response(self.get_serializer(page.contents, many=True).data)
        resp[PAGINATION_HEADER] = metadata.header_value()
        return resp

    # ---- Create / Retrieve ---------------------------------------------------

    def create(self, request, *args, **kwargs):
        patient = self.get_service().create(self._decode_body(partial=False))
        return Response(self.get_serializer(patient).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, *args, **kwargs):
        patient = self.get_service().get(self._pk())
        return Response(self.get_serializer(patient).data)

    # ---- Update --------------------------------------------------------------

    def update(self, request, *args, **kwargs):
        pk = self._pk()
        patient = self.get_service().replace(pk, self._decode_body(partial=False))
        return Response(self.get_serializer(patient).data)

    def partial_update(self, request, *args, **kwargs):
        pk = self._pk()
        patient = self.get_service().patch(pk, self._decode_body(partial=True))
        return Response(self.get_serializer(patient).data)

    # ---- Delete --------------------------------------------------------------

    def destroy(self, request, *args, **kwargs):
        raw = self.kwargs.get(self.lookup_url_kwarg or self.lookup_field)
        try:
            pk = UUID(str(raw))
        except ValueError:
            # nothing could exist under a malformed id
            return Response(status=status.HTTP_204_NO_CONTENT)
        self.get_service().delete(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ---- List / Query by example ---------------------------------------------

    def list(self, request, *args, **kwargs):
        page_request = PageRequest.from_query_params(request.query_params)
        page = self.get_service().page(page_request)
        return self._paged_response(page)

    @extend_schema(
        summary="Query patients by example (paginated)",
        description=(
            "Every supplied field narrows the result. Text fields match case-insensitively "
            "by substring, other fields match exactly. Malformed values (e.g. a bad date) "
            "return 400."
        ),
        parameters=[*ExampleParameters, *PageParameters, PaginationHeader],
        responses={200: PagedPatientsResponse, 400: OpenApiResponse(description="Uncoercible parameter")},
    )
    @action(detail=False, methods=["get"], url_path="queryByExample")
    def query_by_example(self, request):
        template = decode_example(request.query_params.dict())
        page_request = PageRequest.from_query_params(request.query_params)
        page = self.get_service().page(page_request, build_example_filter(template))
        return self._paged_response(page)
