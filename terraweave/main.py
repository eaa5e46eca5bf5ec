# terraweave/main.py
from fastapi import FastAPI, APIRouter, Depends, Header, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.orm import Session
from contextlib import asynccontextmanager
from typing import List, Optional
import logging
import os

from . import config, crud, schemas, utils
from .database import get_db, make_engine, make_session_factory
from .errors import TerraWeaveError, ValidationError, AuthError
from .security import create_access_token, decode_access_token
from .seed import run_setup

logger = logging.getLogger("terraweave")

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Origin", "X-Requested-With", "Content-Type", "Accept", "Authorization"]

api = APIRouter(prefix="/api")


# -----------------
# Auth endpoints
# -----------------
@api.post("/auth/login", response_model=schemas.LoginOut)
def login(payload: schemas.LoginIn, db: Session = Depends(get_db)):
    if not payload.email or not payload.password:
        raise ValidationError("Email and password are required")
    user = crud.authenticate_user(db, payload.email, payload.password)
    if not user:
        raise AuthError("Invalid credentials")
    return {"success": True, "token": create_access_token(user), "user": user}


def require_user(authorization: Optional[str] = Header(None), db: Session = Depends(get_db)):
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise AuthError("Missing bearer token")
    claims = decode_access_token(token.strip())
    try:
        user_id = int(claims["sub"])
    except (KeyError, ValueError):
        raise AuthError("Invalid token")
    user = crud.get_user(db, user_id)
    if not user:
        raise AuthError("Invalid token")
    return user


@api.get("/auth/me", response_model=schemas.UserOut)
def current_user(user=Depends(require_user)):
    return user


# -----------------
# Climate data
# -----------------
@api.get("/cities", response_model=List[schemas.CityOut])
def list_cities(db: Session = Depends(get_db)):
    return crud.list_cities(db)


@api.get("/climate-data/{location}", response_model=List[schemas.ClimateDataPointOut])
def climate_data(location: str, db: Session = Depends(get_db)):
    return crud.get_climate_series(db, location)


@api.get("/energy-plants", response_model=List[schemas.EnergyPlantOut])
def energy_plants(db: Session = Depends(get_db)):
    return crud.list_energy_plants(db)


@api.get("/recommendations/{location_type}", response_model=List[schemas.RecommendationOut])
def recommendations(location_type: str, db: Session = Depends(get_db)):
    return crud.list_recommendations(db, location_type)


# -----------------
# Mock NASA endpoints
# -----------------
@api.get("/nasa/landsat/{location}", response_model=schemas.LandsatOut)
def landsat(location: str):
    return utils.mock_landsat_analysis(location)


@api.get("/nasa/climate/{city}", response_model=schemas.CityClimateOut)
def city_climate(city: str):
    return utils.mock_city_climate(city)


@api.get("/health", response_model=schemas.HealthOut)
def health():
    return {"status": "OK", "message": "TerraWeave+ NASA App Running", "timestamp": utils.utc_now_iso()}


# -----------------
# Error rendering
# -----------------
def terraweave_error_handler(request: Request, exc: TerraWeaveError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.debug("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def _page(name):
    def serve():
        return FileResponse(os.path.join(config.STATIC_DIR, name), media_type="text/html")
    return serve


def create_app(engine=None):
    """Build the application around ``engine`` (the configured database by default).

    Schema creation and seeding run in the lifespan hook, so the server only
    accepts requests once they have finished.
    """
    engine = engine if engine is not None else make_engine(config.DATABASE_URL)
    session_factory = make_session_factory(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        run_setup(engine, session_factory)
        logger.info("TerraWeave+ ready")
        yield

    app = FastAPI(title="TerraWeave+ Climate Data API", lifespan=lifespan)
    app.state.engine = engine
    app.state.session_factory = session_factory
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=CORS_METHODS, allow_headers=CORS_HEADERS)
    app.add_exception_handler(TerraWeaveError, terraweave_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
    app.include_router(api)

    app.add_api_route("/", _page("index.html"), methods=["GET"], include_in_schema=False)
    app.add_api_route("/login", _page("login.html"), methods=["GET"], include_in_schema=False)
    app.add_api_route("/dashboard", _page("dashboard.html"), methods=["GET"], include_in_schema=False)
    return app


app = create_app()


def run():
    import uvicorn

    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    logger.info("TerraWeave+ starting on port %s", config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT)
