# terraweave/schemas.py
from pydantic import BaseModel, ConfigDict
from typing import Optional, List, Dict
from datetime import datetime


class ORMModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class LoginIn(BaseModel):
    # optional so that missing fields reach the handler and answer 400
    email: Optional[str] = None
    password: Optional[str] = None


class UserOut(ORMModel):
    id: int
    email: str
    name: str
    organization: Optional[str] = None
    created_at: Optional[datetime] = None
    last_login: Optional[datetime] = None


class LoginOut(BaseModel):
    success: bool
    token: str
    user: UserOut


class CityOut(ORMModel):
    id: int
    city_name: str
    country: Optional[str] = None
    current_temp: Optional[float] = None
    historical_avg_temp: Optional[float] = None
    anomaly: Optional[float] = None
    aqi: Optional[int] = None
    vegetation_change_pct: Optional[float] = None
    precipitation_change_pct: Optional[float] = None
    last_updated: Optional[datetime] = None


class ClimateDataPointOut(ORMModel):
    id: Optional[int] = None
    location_name: str
    data_type: str
    year: int
    value: Optional[float] = None
    unit: Optional[str] = None
    source: Optional[str] = None
    created_at: Optional[datetime] = None


class EnergyPlantOut(ORMModel):
    id: int
    plant_name: str
    plant_type: str
    capacity_mw: Optional[int] = None
    co2_emissions_tons_per_year: Optional[float] = None
    population_impact: Optional[int] = None
    location: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None


class RecommendationOut(ORMModel):
    id: int
    location_type: str
    climate_issue: str
    recommendation_text: str
    impact_co2: Optional[float] = None
    difficulty_level: Optional[str] = None
    estimated_cost: Optional[str] = None


class LandsatAnalysis(BaseModel):
    urban_growth_pct: float
    temperature_change: float
    vegetation_change_pct: float
    climate_risk: str
    recommendations: List[str]


class LandsatOut(BaseModel):
    location: str
    images: Dict[str, str]
    analysis: LandsatAnalysis
    source: str


class CityClimateOut(BaseModel):
    city: str
    current_temp: float
    historical_avg: float
    anomaly: str
    trend: str
    source: str


class HealthOut(BaseModel):
    status: str
    message: str
    timestamp: str
