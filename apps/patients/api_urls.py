# apps/patients/api_urls.py
from rest_framework.routers import SimpleRouter

from .api import PatientViewSet

app_name = "patients_api"

# patients/, patients/<id>/, patients/queryByExample/
router = SimpleRouter()
router.register(r"patients", PatientViewSet, basename="patient")

urlpatterns = router.urls
