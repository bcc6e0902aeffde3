"""Dashboard statistics and CSV exports."""

from fastapi import APIRouter, Depends, Response
import structlog

from talent_directory.auth.dependencies import get_current_tenant, get_store
from talent_directory.kv.base import KeyValueStore
from talent_directory.schemas.stats import DashboardStats
from talent_directory.schemas.tenant import TenantResponse
from talent_directory.services import aggregation, export_service
from talent_directory.services.subscriber_service import SubscriberService
from talent_directory.services.talent_pool_service import TalentPoolService

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["dashboard"])


def _csv_response(content: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )


@router.get("/stats/dashboard", response_model=DashboardStats)
async def get_dashboard_stats(
    store: KeyValueStore = Depends(get_store),
    current_tenant: TenantResponse = Depends(get_current_tenant)
):
    """Totals, recent signups, LinkedIn coverage and top department."""
    subscribers = SubscriberService().list_subscribers(store, current_tenant.id)
    return aggregation.dashboard_stats(subscribers)


@router.get("/exports/subscribers.csv")
async def export_subscribers(
    store: KeyValueStore = Depends(get_store),
    current_tenant: TenantResponse = Depends(get_current_tenant)
):
    subscribers = SubscriberService().list_subscribers(store, current_tenant.id)
    logger.info("Subscribers exported", tenant_id=current_tenant.id, count=len(subscribers))
    return _csv_response(
        export_service.subscribers_csv(subscribers),
        export_service.export_filename(current_tenant.company_name, "subscribers")
    )


@router.get("/exports/talent-pools.csv")
async def export_talent_pools(
    store: KeyValueStore = Depends(get_store),
    current_tenant: TenantResponse = Depends(get_current_tenant)
):
    """One summary row per talent pool with its candidate count."""
    pools = TalentPoolService().list_talent_pools(store, current_tenant.id)
    subscribers = SubscriberService().list_subscribers(store, current_tenant.id)
    logger.info("Talent pools exported", tenant_id=current_tenant.id, count=len(pools))
    return _csv_response(
        export_service.pool_summary_csv(pools, subscribers),
        export_service.export_filename(current_tenant.company_name, "talent_pools")
    )
