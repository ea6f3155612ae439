from fastapi import APIRouter
from hrms.routers import departments, employees, leave, benefits, payroll, records, reports, settings

# Centralized API router hub
# Routers are aggregated here, and main.py only imports this single hub.
api_router = APIRouter()

api_router.include_router(departments.router)
api_router.include_router(employees.router)
api_router.include_router(leave.router)
api_router.include_router(benefits.router)
api_router.include_router(payroll.router)
api_router.include_router(records.assets_router)
api_router.include_router(records.expenses_router)
api_router.include_router(records.disciplinary_router)
api_router.include_router(records.health_insurance_router)
api_router.include_router(records.compliance_router)
api_router.include_router(records.performance_router)
api_router.include_router(records.attendance_router)
api_router.include_router(records.visas_router)
api_router.include_router(records.driving_licences_router)
api_router.include_router(records.vehicles_router)
api_router.include_router(settings.router)
api_router.include_router(reports.router)
