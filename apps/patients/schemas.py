# apps/patients/schemas.py
# centralize Swagger/OpenAPI parameters & examples here
# so /api/docs shows prefilled requests and the pagination header.
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiExample, OpenApiParameter, OpenApiResponse

from .models import Gender
from .pagination import PAGINATION_HEADER
from .serializers import PatientSerializer

# ---- pagination ----

PageParameters = [
    OpenApiParameter(
        name="page",
        description="Zero-based page number (default 0)",
        required=False,
        type=OpenApiTypes.INT,
    ),
    OpenApiParameter(
        name="size",
        description="Page size (default 30, capped at 2000)",
        required=False,
        type=OpenApiTypes.INT,
    ),
]

PaginationHeader = OpenApiParameter(
    name=PAGINATION_HEADER,
    location=OpenApiParameter.HEADER,
    response=True,
    type=OpenApiTypes.STR,
    description="page-number=<n>,page-size=<n>,total-elements=<n>,total-pages=<n>",
)

PagedPatientsResponse = OpenApiResponse(
    response=PatientSerializer(many=True),
    description="One page of patients; paging metadata is in the X-Meta-Pagination header.",
)

# ---- query by example ----

_TEXT_HELP = "case-insensitive substring match"

ExampleParameters = [
    OpenApiParameter(name="given_name", description=_TEXT_HELP, required=False, type=OpenApiTypes.STR),
    OpenApiParameter(name="additional_name", description=_TEXT_HELP, required=False, type=OpenApiTypes.STR),
    OpenApiParameter(name="family_name", description=_TEXT_HELP, required=False, type=OpenApiTypes.STR),
    OpenApiParameter(name="email", description=_TEXT_HELP, required=False, type=OpenApiTypes.STR),
    OpenApiParameter(
        name="birth_date",
        description="exact match, YYYY-MM-DD",
        required=False,
        type=OpenApiTypes.DATE,
    ),
    OpenApiParameter(
        name="gender",
        description="exact match",
        required=False,
        type=OpenApiTypes.STR,
        enum=[value for value, _ in Gender.choices],
    ),
    OpenApiParameter(name="height", description="exact match", required=False, type=OpenApiTypes.INT),
    OpenApiParameter(name="weight", description="exact match", required=False, type=OpenApiTypes.INT),
]

# ---- request body examples (prefilled) ----

CreatePatientExample = OpenApiExample(
    "New patient",
    value={
        "given_name": "Jane",
        "additional_name": "Q",
        "family_name": "Doe",
        "birth_date": "1990-04-12",
        "email": "jane@example.com",
        "gender": "female",
        "height": 168,
        "weight": 61,
    },
    request_only=True,
    description="Every field is optional; omitted fields are stored as null.",
)

ReplacePatientExample = OpenApiExample(
    "Replace patient",
    value={"family_name": "Doe"},
    request_only=True,
    description="PUT replaces the whole record: given_name and the rest become null here.",
)

PatchPatientExample = OpenApiExample(
    "Patch patient",
    value={"family_name": "Doe"},
    request_only=True,
    description="PATCH only touches the fields sent; null or omitted fields keep their value.",
)
