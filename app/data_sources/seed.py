"""
Mock 매물 데이터
MockListingsProvider가 검색 대상으로 사용하는 고정 매물 목록입니다.
"""

from datetime import datetime
from uuid import UUID

from app.schemas.listing import Listing, PropertyType

_CREATED_AT = datetime(2024, 1, 15, 9, 0, 0)


def _listing(id: str, **fields) -> Listing:
    return Listing(id=UUID(id), created_at=_CREATED_AT, **fields)


SEED_LISTINGS: list[Listing] = [
    # === Land O Lakes ===
    _listing(
        "550e8400-e29b-41d4-a716-446655440000",
        address_masked="1234 *** St, Land O Lakes, FL",
        city="Land O Lakes", state="FL", zip="34639",
        lat=28.15, lng=-82.45,
        price=450000, beds=3, baths=2, sqft=2000, lot_sqft=7500,
        year_built=2015, property_type=PropertyType.SINGLE_FAMILY,
        taxes_annual_estimate=5400, insurance_annual_estimate=2700,
        features=["garage", "pool", "fenced yard"],
        photos=["/photos/home1.jpg"],
    ),
    _listing(
        "550e8400-e29b-41d4-a716-446655440001",
        address_masked="5678 *** Ave, Land O Lakes, FL",
        city="Land O Lakes", state="FL", zip="34638",
        lat=28.21, lng=-82.48,
        price=385000, beds=4, baths=2.5, sqft=2650, lot_sqft=9000,
        year_built=2021, property_type=PropertyType.SINGLE_FAMILY,
        hoa_monthly=85,
        features=["garage", "community pool", "open floor plan"],
        photos=["/photos/home2.jpg"],
    ),
    _listing(
        "550e8400-e29b-41d4-a716-446655440002",
        address_masked="910 *** Ct, Land O Lakes, FL",
        city="Land O Lakes", state="FL", zip="34639",
        lat=28.18, lng=-82.46,
        price=329000, beds=3, baths=2, sqft=1650,
        year_built=2008, property_type=PropertyType.TOWNHOME,
        hoa_monthly=240,
        features=["garage"],
        photos=["/photos/home3.jpg"],
    ),
    # === Winter Park ===
    _listing(
        "550e8400-e29b-41d4-a716-446655440003",
        address_masked="221 *** Blvd, Winter Park, FL",
        city="Winter Park", state="FL", zip="32789",
        lat=28.60, lng=-81.34,
        price=725000, beds=4, baths=3, sqft=2900, lot_sqft=11000,
        year_built=1962, property_type=PropertyType.SINGLE_FAMILY,
        taxes_annual_estimate=9800, insurance_annual_estimate=4100,
        features=["garage", "pool", "renovated kitchen", "fireplace"],
        photos=["/photos/home4.jpg"],
    ),
    _listing(
        "550e8400-e29b-41d4-a716-446655440004",
        address_masked="48 *** Ln, Winter Park, FL",
        city="Winter Park", state="FL", zip="32792",
        lat=28.59, lng=-81.30,
        price=415000, beds=2, baths=2, sqft=1150,
        year_built=2019, property_type=PropertyType.CONDO,
        hoa_monthly=410,
        features=["balcony", "fitness center"],
        photos=["/photos/home5.jpg"],
    ),
    # === Coral Gables ===
    _listing(
        "550e8400-e29b-41d4-a716-446655440005",
        address_masked="3100 *** Way, Coral Gables, FL",
        city="Coral Gables", state="FL", zip="33134",
        lat=25.75, lng=-80.27,
        price=1150000, beds=4, baths=3.5, sqft=3200, lot_sqft=10500,
        year_built=1955, property_type=PropertyType.SINGLE_FAMILY,
        features=["pool", "garage", "impact windows"],
        photos=["/photos/home6.jpg"],
    ),
    _listing(
        "550e8400-e29b-41d4-a716-446655440006",
        address_masked="77 *** Dr, Coral Gables, FL",
        city="Coral Gables", state="FL", zip="33146",
        lat=25.72, lng=-80.28,
        price=640000, beds=3, baths=2, sqft=1800,
        year_built=2004, property_type=PropertyType.TOWNHOME,
        hoa_monthly=350,
        features=["garage", "patio"],
        photos=["/photos/home7.jpg"],
    ),
    # === Carrollwood (Tampa) ===
    _listing(
        "550e8400-e29b-41d4-a716-446655440007",
        address_masked="1502 *** Rd, Carrollwood, FL",
        city="Carrollwood", state="FL", zip="33618",
        lat=28.05, lng=-82.50,
        price=399000, beds=3, baths=2, sqft=1900, lot_sqft=8200,
        year_built=1985, property_type=PropertyType.SINGLE_FAMILY,
        features=["garage", "screened lanai"],
        photos=["/photos/home8.jpg"],
    ),
    _listing(
        "550e8400-e29b-41d4-a716-446655440008",
        address_masked="66 *** Pl, Carrollwood, FL",
        city="Carrollwood", state="FL", zip="33624",
        lat=28.07, lng=-82.53,
        price=285000, beds=2, baths=2, sqft=1250,
        year_built=1999, property_type=PropertyType.CONDO,
        hoa_monthly=290,
        features=[],
        photos=["/photos/home9.jpg"],
    ),
    # === Miami / Downtown ===
    _listing(
        "550e8400-e29b-41d4-a716-446655440009",
        address_masked="800 *** Ave #1204, Miami, FL",
        city="Miami", state="FL", zip="33131",
        lat=25.77, lng=-80.19,
        price=560000, beds=2, baths=2, sqft=1100,
        year_built=2016, property_type=PropertyType.CONDO,
        hoa_monthly=780,
        features=["balcony", "water view", "concierge", "pool"],
        photos=["/photos/home10.jpg"],
    ),
    _listing(
        "550e8400-e29b-41d4-a716-446655440010",
        address_masked="15 *** St #502, Downtown Tampa, FL",
        city="Downtown Tampa", state="FL", zip="33602",
        lat=27.95, lng=-82.46,
        price=349000, beds=1, baths=1, sqft=820,
        year_built=2020, property_type=PropertyType.CONDO,
        hoa_monthly=520,
        features=["fitness center", "garage"],
        photos=["/photos/home11.jpg"],
    ),
]
