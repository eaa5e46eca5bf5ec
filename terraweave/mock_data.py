# terraweave/mock_data.py
# Fixed datasets: seed rows for first boot and the lookup tables behind the
# mocked NASA endpoints. Loaded once at import.

SEED_CITIES = [
    {"city_name": "Pretoria", "country": "South Africa", "current_temp": 32.0, "historical_avg_temp": 28.0,
     "aqi": 85, "vegetation_change_pct": -12.0, "precipitation_change_pct": -50.0},
    {"city_name": "Moscow", "country": "Russia", "current_temp": 18.0, "historical_avg_temp": 16.0,
     "aqi": 45, "vegetation_change_pct": 5.0, "precipitation_change_pct": 20.0},
    {"city_name": "Tokyo", "country": "Japan", "current_temp": 25.0, "historical_avg_temp": 24.0,
     "aqi": 65, "vegetation_change_pct": -3.0, "precipitation_change_pct": -10.0},
    {"city_name": "Lagos", "country": "Nigeria", "current_temp": 35.0, "historical_avg_temp": 32.0,
     "aqi": 95, "vegetation_change_pct": -8.0, "precipitation_change_pct": -30.0},
    {"city_name": "London", "country": "United Kingdom", "current_temp": 15.0, "historical_avg_temp": 14.0,
     "aqi": 55, "vegetation_change_pct": 2.0, "precipitation_change_pct": 15.0},
]

SEED_CLIMATE_DATA = [
    # Pretoria temperature anomaly (deg C vs 1951-1980 baseline)
    {"location_name": "Pretoria", "data_type": "temperature", "year": 1984, "value": 0.6, "unit": "°C"},
    {"location_name": "Pretoria", "data_type": "temperature", "year": 1994, "value": 0.9, "unit": "°C"},
    {"location_name": "Pretoria", "data_type": "temperature", "year": 2004, "value": 1.3, "unit": "°C"},
    {"location_name": "Pretoria", "data_type": "temperature", "year": 2014, "value": 1.8, "unit": "°C"},
    {"location_name": "Pretoria", "data_type": "temperature", "year": 2020, "value": 2.0, "unit": "°C"},
    {"location_name": "Pretoria", "data_type": "temperature", "year": 2024, "value": 2.1, "unit": "°C"},
    {"location_name": "Pretoria", "data_type": "vegetation", "year": 1984, "value": 68.0, "unit": "%"},
    {"location_name": "Pretoria", "data_type": "vegetation", "year": 2024, "value": 50.0, "unit": "%"},
    {"location_name": "Pretoria", "data_type": "urban_area", "year": 1984, "value": 22.0, "unit": "%"},
    {"location_name": "Pretoria", "data_type": "urban_area", "year": 2024, "value": 57.0, "unit": "%"},
]
CLIMATE_DATA_SOURCE = "NASA GISS (mock)"

SEED_ENERGY_PLANTS = [
    {"plant_name": "Kendal Power Station", "plant_type": "Coal", "capacity_mw": 4116,
     "co2_emissions_tons_per_year": 18200000, "population_impact": 2100000,
     "location": "Mpumalanga", "lat": -26.0886, "lng": 28.9686},
    {"plant_name": "Medupi Power Station", "plant_type": "Coal", "capacity_mw": 4764,
     "co2_emissions_tons_per_year": 21500000, "population_impact": 2800000,
     "location": "Limpopo", "lat": -23.7036, "lng": 27.5567},
    {"plant_name": "Matimba Power Station", "plant_type": "Coal", "capacity_mw": 3990,
     "co2_emissions_tons_per_year": 16800000, "population_impact": 1200000,
     "location": "Limpopo", "lat": -23.6680, "lng": 27.6100},
    {"plant_name": "Ankerlig Power Station", "plant_type": "Gas", "capacity_mw": 1338,
     "co2_emissions_tons_per_year": 1100000, "population_impact": 400000,
     "location": "Western Cape", "lat": -33.5892, "lng": 18.4658},
    {"plant_name": "Koeberg Nuclear", "plant_type": "Nuclear", "capacity_mw": 1860,
     "co2_emissions_tons_per_year": 0, "population_impact": 50000,
     "location": "Western Cape", "lat": -33.6764, "lng": 18.4317},
]

SEED_RECOMMENDATIONS = [
    {"location_type": "urban", "climate_issue": "Urban heat island",
     "recommendation_text": "Plant native trees such as Spekboom along streets and in public spaces",
     "impact_co2": 0.05, "difficulty_level": "easy", "estimated_cost": "low"},
    {"location_type": "urban", "climate_issue": "Transport emissions",
     "recommendation_text": "Expand public transport and reduce car usage by 2 days per week",
     "impact_co2": 0.8, "difficulty_level": "medium", "estimated_cost": "medium"},
    {"location_type": "urban", "climate_issue": "Coal dependency",
     "recommendation_text": "Deploy rooftop solar on municipal buildings",
     "impact_co2": 3.0, "difficulty_level": "hard", "estimated_cost": "high"},
    {"location_type": "residential", "climate_issue": "Energy consumption",
     "recommendation_text": "Switch to LED lighting and optimize AC usage during peak hours",
     "impact_co2": 1.2, "difficulty_level": "easy", "estimated_cost": "low"},
    {"location_type": "residential", "climate_issue": "Grid electricity",
     "recommendation_text": "Consider solar panel installation or green energy tariffs",
     "impact_co2": 3.0, "difficulty_level": "medium", "estimated_cost": "high"},
    {"location_type": "residential", "climate_issue": "Water scarcity",
     "recommendation_text": "Install rainwater harvesting tanks and greywater reuse",
     "impact_co2": 0.3, "difficulty_level": "medium", "estimated_cost": "medium"},
    {"location_type": "corporate", "climate_issue": "Office energy use",
     "recommendation_text": "Adopt smart building controls and renewable energy procurement",
     "impact_co2": 25.0, "difficulty_level": "medium", "estimated_cost": "high"},
    {"location_type": "corporate", "climate_issue": "Business travel",
     "recommendation_text": "Replace short-haul flights with video conferencing",
     "impact_co2": 12.5, "difficulty_level": "easy", "estimated_cost": "low"},
]

SEED_ADMIN = {"name": "Admin User", "organization": "NASA"}

# Returned instead of an empty list when a location has no stored rows
FALLBACK_SERIES = [
    {"year": 2024, "value": 2.1},
    {"year": 2020, "value": 2.0},
    {"year": 2014, "value": 1.8},
]
FALLBACK_UNIT = "°C"

# city (lowercase) -> (current, historical average) in deg C
MOCK_CITY_TEMPS = {
    "pretoria": (32.0, 28.0),
    "moscow": (18.0, 16.0),
    "tokyo": (25.0, 24.0),
    "lagos": (35.0, 32.0),
    "london": (15.0, 14.0),
}
DEFAULT_CITY_TEMPS = (25.0, 23.0)

LANDSAT_YEARS = (1984, 2024)
LANDSAT_IMAGE_URL = "https://via.placeholder.com/400x300?text=Landsat+{location}+{year}"
LANDSAT_ANALYSIS = {
    "urban_growth_pct": 35.0,
    "temperature_change": 2.1,
    "vegetation_change_pct": -15.0,
    "climate_risk": "Medium-High",
    "recommendations": [
        "Implement green infrastructure",
        "Monitor water resources",
        "Develop climate adaptation plan",
    ],
}
MOCK_SOURCE = "NASA (mock data)"
