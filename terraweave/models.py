# terraweave/models.py
from sqlalchemy import (Column, String, Integer, Numeric, Boolean, DateTime, Text, Enum,
                        ForeignKey, UniqueConstraint)
from sqlalchemy.orm import relationship, validates
from datetime import datetime
from .database import Base

DATA_TYPES = ("temperature", "vegetation", "urban_area", "precipitation")
PLANT_TYPES = ("Coal", "Nuclear", "Gas", "Solar", "Wind", "Hydro")
LOCATION_TYPES = ("urban", "residential", "corporate")
DIFFICULTY_LEVELS = ("easy", "medium", "hard")
COST_LEVELS = ("low", "medium", "high")


def normalize_location(name):
    return (name or "").strip().casefold()


def _enum(values, name):
    return Enum(*values, name=name, native_enum=False, create_constraint=True)


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    organization = Column(String(255))
    created_at = Column(DateTime, default=datetime.utcnow)
    last_login = Column(DateTime, nullable=True)

    actions = relationship("UserAction", back_populates="user")


class CityClimateRecord(Base):
    __tablename__ = "city_climate_data"
    id = Column(Integer, primary_key=True)
    city_name = Column(String(100), unique=True, nullable=False)
    country = Column(String(100))
    current_temp = Column(Numeric(5, 2))
    historical_avg_temp = Column(Numeric(5, 2))
    aqi = Column(Integer)
    vegetation_change_pct = Column(Numeric(5, 2))
    precipitation_change_pct = Column(Numeric(5, 2))
    last_updated = Column(DateTime, default=datetime.utcnow)

    @property
    def anomaly(self):
        # derived on read, never stored
        if self.current_temp is None or self.historical_avg_temp is None:
            return None
        return self.current_temp - self.historical_avg_temp


class ClimateDataPoint(Base):
    __tablename__ = "climate_data"
    __table_args__ = (UniqueConstraint("location_name", "data_type", "year"),)
    id = Column(Integer, primary_key=True)
    location_name = Column(String(100), nullable=False)
    # casefolded location_name; SQLite lower() only folds ASCII
    location_key = Column(String(100), nullable=False, index=True)
    data_type = Column(_enum(DATA_TYPES, "climate_data_type"), nullable=False)
    year = Column(Integer, nullable=False)
    value = Column(Numeric(10, 2))
    unit = Column(String(20))
    source = Column(String(100))
    created_at = Column(DateTime, default=datetime.utcnow)

    @validates("location_name")
    def _set_location_key(self, key, value):
        self.location_key = normalize_location(value)
        return value


class EnergyPlant(Base):
    __tablename__ = "energy_plants"
    id = Column(Integer, primary_key=True)
    plant_name = Column(String(100), unique=True, nullable=False)
    plant_type = Column(_enum(PLANT_TYPES, "plant_type"), nullable=False)
    capacity_mw = Column(Integer)
    co2_emissions_tons_per_year = Column(Numeric(15, 2))
    population_impact = Column(Integer)
    location = Column(String(100))
    lat = Column(Numeric(10, 8))
    lng = Column(Numeric(11, 8))


class ActionRecommendation(Base):
    __tablename__ = "action_recommendations"
    __table_args__ = (UniqueConstraint("location_type", "climate_issue"),)
    id = Column(Integer, primary_key=True)
    location_type = Column(_enum(LOCATION_TYPES, "location_type"), nullable=False)
    climate_issue = Column(String(100), nullable=False)
    recommendation_text = Column(Text, nullable=False)
    impact_co2 = Column(Numeric(10, 2))
    difficulty_level = Column(_enum(DIFFICULTY_LEVELS, "difficulty_level"))
    estimated_cost = Column(_enum(COST_LEVELS, "estimated_cost"))

    actions = relationship("UserAction", back_populates="recommendation")


class UserAction(Base):
    __tablename__ = "user_actions"
    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    recommendation_id = Column(Integer, ForeignKey("action_recommendations.id"), nullable=False)
    action_taken = Column(Boolean, default=False)
    date_completed = Column(DateTime, nullable=True)
    impact_co2 = Column(Numeric(10, 2))
    notes = Column(Text)

    user = relationship("User", back_populates="actions")
    recommendation = relationship("ActionRecommendation", back_populates="actions")
