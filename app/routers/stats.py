from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.crud import stats as crud
from app.database import get_db
from app.schemas.stats import StatsEnvelope

router = APIRouter()


@router.get("", response_model=StatsEnvelope)
def read_stats(db: Session = Depends(get_db)):
    return {"stats": crud.get_stats(db)}
