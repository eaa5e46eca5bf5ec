# terraweave/crud.py
from . import models, config
from .errors import StoreError
from .mock_data import FALLBACK_SERIES, FALLBACK_UNIT, MOCK_SOURCE
from .security import verify_password
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from datetime import datetime
import functools
import logging

logger = logging.getLogger("terraweave.crud")

TIME_SERIES_LIMIT = 10


def store_call(fn):
    """Turn backing-store failures into StoreError; the session is rolled back."""
    @functools.wraps(fn)
    def wrapper(db: Session, *args, **kwargs):
        try:
            return fn(db, *args, **kwargs)
        except SQLAlchemyError as exc:
            logger.error("Store failure in %s: %s", fn.__name__, exc)
            db.rollback()
            raise StoreError("Database error") from exc
    return wrapper


# Auth
@store_call
def get_user(db: Session, user_id):
    return db.get(models.User, user_id)


@store_call
def authenticate_user(db: Session, email, password, demo_login=None):
    if demo_login is None:
        demo_login = config.DEMO_LOGIN
    user = db.query(models.User).filter(models.User.email == email).first()
    if not user:
        logger.warning("Login attempt for unknown email %s", email)
        return None
    if not demo_login and not verify_password(password, user.password_hash):
        logger.warning("Bad password for %s", email)
        return None
    user.last_login = datetime.utcnow()
    db.add(user); db.commit(); db.refresh(user)
    return user


# Climate data
@store_call
def list_cities(db: Session):
    return db.query(models.CityClimateRecord).order_by(models.CityClimateRecord.city_name.asc()).all()


@store_call
def get_climate_series(db: Session, location, limit=TIME_SERIES_LIMIT):
    rows = (
        db.query(models.ClimateDataPoint)
        .filter(models.ClimateDataPoint.location_key == models.normalize_location(location))
        .order_by(models.ClimateDataPoint.year.desc(), models.ClimateDataPoint.id.desc())
        .limit(limit)
        .all()
    )
    if rows:
        return rows
    return fallback_series(location)


def fallback_series(location):
    return [
        {"location_name": location, "data_type": "temperature", "year": p["year"], "value": p["value"],
         "unit": FALLBACK_UNIT, "source": MOCK_SOURCE}
        for p in FALLBACK_SERIES
    ]


@store_call
def list_energy_plants(db: Session):
    return (
        db.query(models.EnergyPlant)
        .order_by(models.EnergyPlant.co2_emissions_tons_per_year.desc(), models.EnergyPlant.plant_name.asc())
        .all()
    )


@store_call
def list_recommendations(db: Session, location_type):
    return (
        db.query(models.ActionRecommendation)
        .filter(models.ActionRecommendation.location_type == location_type)
        .order_by(models.ActionRecommendation.impact_co2.desc(), models.ActionRecommendation.id.asc())
        .all()
    )
