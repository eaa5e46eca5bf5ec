# terraweave/seed.py
"""Startup: schema creation followed by idempotent seeding.

Setup is an ordered list of steps. Each step runs only after the previous one
finished. A fatal step re-raises and stops startup; a non-fatal step is logged
and skipped so the service can run with partial or empty data.
"""
from dataclasses import dataclass
from typing import Callable, List
import logging

from sqlalchemy.orm import Session

from . import models, config
from .database import Base, ensure_sqlite_dir, make_session_factory
from .mock_data import (SEED_CITIES, SEED_CLIMATE_DATA, CLIMATE_DATA_SOURCE, SEED_ENERGY_PLANTS,
                        SEED_RECOMMENDATIONS, SEED_ADMIN)
from .security import hash_password

logger = logging.getLogger("terraweave.seed")


@dataclass
class SetupStep:
    name: str
    run: Callable
    fatal: bool = False


def create_schema(engine, session_factory):
    ensure_sqlite_dir(engine)
    # create_all only issues CREATE TABLE for missing tables
    Base.metadata.create_all(bind=engine)


def _insert_missing(db: Session, model, rows, key_fields, **extra):
    """Insert each row whose natural key is not present yet. Returns the number inserted."""
    inserted = 0
    for row in rows:
        key = {field: row[field] for field in key_fields}
        if db.query(model).filter_by(**key).first() is not None:
            continue
        db.add(model(**row, **extra))
        inserted += 1
    db.commit()
    return inserted


def _seeder(model, rows, key_fields, **extra):
    def seed(engine, session_factory):
        db = session_factory()
        try:
            count = _insert_missing(db, model, rows, key_fields, **extra)
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()
        logger.info("Seeded %d new %s rows", count, model.__tablename__)
    return seed


def seed_admin(engine, session_factory):
    db = session_factory()
    try:
        if db.query(models.User).filter_by(email=config.ADMIN_EMAIL).first() is None:
            db.add(models.User(email=config.ADMIN_EMAIL, password_hash=hash_password(config.ADMIN_PASSWORD),
                               **SEED_ADMIN))
            db.commit()
            logger.info("Seeded admin user %s", config.ADMIN_EMAIL)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


SETUP_STEPS: List[SetupStep] = [
    SetupStep("create schema", create_schema, fatal=True),
    SetupStep("seed users", seed_admin),
    SetupStep("seed cities", _seeder(models.CityClimateRecord, SEED_CITIES, ["city_name"])),
    SetupStep("seed climate data", _seeder(models.ClimateDataPoint, SEED_CLIMATE_DATA,
                                           ["location_name", "data_type", "year"], source=CLIMATE_DATA_SOURCE)),
    SetupStep("seed energy plants", _seeder(models.EnergyPlant, SEED_ENERGY_PLANTS, ["plant_name"])),
    SetupStep("seed recommendations", _seeder(models.ActionRecommendation, SEED_RECOMMENDATIONS,
                                              ["location_type", "climate_issue"])),
]


def run_setup(engine, session_factory=None, steps=None):
    """Run the setup steps in order against ``engine``."""
    session_factory = session_factory or make_session_factory(engine)
    for step in (SETUP_STEPS if steps is None else steps):
        logger.info("Startup step: %s", step.name)
        try:
            step.run(engine, session_factory)
        except Exception:
            if step.fatal:
                logger.exception("Startup step %r failed; aborting", step.name)
                raise
            logger.exception("Startup step %r failed; continuing without it", step.name)
