# src/services/admin_service/routes.py
from fastapi import APIRouter, Depends

from src.services.dependencies import get_app_state
from src.services.state import AppState

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post("/reload-csv")
async def reload_csv(state: AppState = Depends(get_app_state)):
    """Перечитывает CSV без перезапуска процесса."""
    count = await state.catalog.reload(state.csv_path)
    return {"ok": True, "locations": count}
