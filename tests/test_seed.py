import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError

from terraweave import models
from terraweave.database import make_engine, make_session_factory
from terraweave.mock_data import SEED_CITIES, SEED_ENERGY_PLANTS, SEED_RECOMMENDATIONS, SEED_CLIMATE_DATA
from terraweave.seed import SETUP_STEPS, SetupStep, create_schema, run_setup


def _counts(db):
    return {
        "users": db.query(models.User).count(),
        "cities": db.query(models.CityClimateRecord).count(),
        "climate": db.query(models.ClimateDataPoint).count(),
        "plants": db.query(models.EnergyPlant).count(),
        "recommendations": db.query(models.ActionRecommendation).count(),
    }


def test_startup_seeds_every_table(client, db):
    assert _counts(db) == {
        "users": 1,
        "cities": len(SEED_CITIES),
        "climate": len(SEED_CLIMATE_DATA),
        "plants": len(SEED_ENERGY_PLANTS),
        "recommendations": len(SEED_RECOMMENDATIONS),
    }


def test_rerunning_setup_is_idempotent(client, app, db):
    before = _counts(db)
    run_setup(app.state.engine, app.state.session_factory)
    run_setup(app.state.engine, app.state.session_factory)
    assert _counts(db) == before


def test_schema_failure_is_fatal(engine):
    def broken(engine, session_factory):
        raise RuntimeError("disk full")

    with pytest.raises(RuntimeError):
        run_setup(engine, steps=[SetupStep("create schema", broken, fatal=True)])


def test_seed_failure_is_not_fatal(engine):
    def broken(engine, session_factory):
        raise RuntimeError("bad seed")

    seed_cities = next(step for step in SETUP_STEPS if step.name == "seed cities")
    run_setup(engine, steps=[SetupStep("create schema", create_schema, fatal=True),
                             SetupStep("seed users", broken),
                             seed_cities])

    db = make_session_factory(engine)()
    try:
        assert db.query(models.User).count() == 0
        assert db.query(models.CityClimateRecord).count() == len(SEED_CITIES)
    finally:
        db.close()


def test_schema_creation_keeps_existing_rows(engine):
    run_setup(engine)
    create_schema(engine, None)
    assert set(inspect(engine).get_table_names()) >= {
        "users", "city_climate_data", "climate_data", "energy_plants", "action_recommendations", "user_actions",
    }
    db = make_session_factory(engine)()
    try:
        assert db.query(models.CityClimateRecord).count() == len(SEED_CITIES)
    finally:
        db.close()


def test_user_action_requires_existing_rows(client, db):
    db.add(models.UserAction(user_id=999, recommendation_id=999, action_taken=True))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_user_email_is_unique(client, db):
    existing = db.query(models.User).first()
    db.add(models.User(email=existing.email, password_hash="x", name="Copy"))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_engine_creation_has_no_filesystem_side_effects(tmp_path):
    eng = make_engine(f"sqlite:///{tmp_path / 'later' / 'terraweave.db'}")
    try:
        assert not (tmp_path / "later").exists()
    finally:
        eng.dispose()


def test_file_database_is_created(tmp_path):
    url = f"sqlite:///{tmp_path / 'nested' / 'terraweave.db'}"
    eng = make_engine(url)
    try:
        run_setup(eng)
        assert (tmp_path / "nested" / "terraweave.db").exists()
    finally:
        eng.dispose()
