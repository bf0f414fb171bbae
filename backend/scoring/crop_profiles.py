"""
Single source of truth for crop climate requirements.
Adding a new crop = add one profile here.

Temperatures in °C, rainfall as yearly totals in mm, moisture as root-zone
wetness fraction [0..1].
"""
from types import MappingProxyType
from typing import List, Mapping

from models import CropProfile

_PROFILES = {
    "rice": CropProfile(
        min_temp=20, max_temp=35,
        min_rain=1200, max_rain=2400,
        moisture_ideal_min=0.5, moisture_ideal_max=0.9,
        season="Kharif",
        description="Staple grain crop, needs consistent water",
        tips="Plant in standing water, maintain water level",
    ),
    "wheat": CropProfile(
        min_temp=10, max_temp=25,
        min_rain=300, max_rain=1200,
        moisture_ideal_min=0.15, moisture_ideal_max=0.35,
        season="Rabi",
        description="Winter cereal crop, moderate water needs",
        tips="Sow seeds 2-3 cm deep, needs well-drained soil",
    ),
    "cotton": CropProfile(
        min_temp=20, max_temp=35,
        min_rain=500, max_rain=1000,
        moisture_ideal_min=0.2, moisture_ideal_max=0.45,
        season="Kharif",
        description="Fiber crop, needs warm climate",
        tips="Plant in full sun, avoid waterlogging",
    ),
    "maize": CropProfile(
        min_temp=16, max_temp=32,
        min_rain=500, max_rain=1100,
        moisture_ideal_min=0.25, moisture_ideal_max=0.5,
        season="Kharif",
        description="Grain crop, needs well-drained soil",
        tips="Plant in blocks for pollination, water regularly",
    ),
    "sugarcane": CropProfile(
        min_temp=20, max_temp=35,
        min_rain=750, max_rain=2000,
        moisture_ideal_min=0.4, moisture_ideal_max=0.8,
        season="Kharif",
        description="Tropical crop, high water needs",
        tips="Plant in rows, needs rich soil",
    ),
    "potato": CropProfile(
        min_temp=8, max_temp=25,
        min_rain=300, max_rain=800,
        moisture_ideal_min=0.25, moisture_ideal_max=0.6,
        season="Rabi",
        description="Root crop, grows in cool weather",
        tips="Plant in trenches, hill up soil around plants",
    ),
    "tomato": CropProfile(
        min_temp=15, max_temp=30,
        min_rain=400, max_rain=1000,
        moisture_ideal_min=0.25, moisture_ideal_max=0.6,
        season="Kharif",
        description="Warm-season crop, needs full sun",
        tips="Stake plants, water at base to avoid leaf diseases",
    ),
    "chilli": CropProfile(
        min_temp=20, max_temp=32,
        min_rain=400, max_rain=1000,
        moisture_ideal_min=0.25, moisture_ideal_max=0.6,
        season="Kharif",
        description="Spice crop, grows in hot climate",
        tips="Mulch soil, avoid overwatering",
    ),
    "onion": CropProfile(
        min_temp=10, max_temp=25,
        min_rain=300, max_rain=800,
        moisture_ideal_min=0.2, moisture_ideal_max=0.5,
        season="Rabi",
        description="Bulb crop, grows in cool weather",
        tips="Plant in rows, water moderately",
    ),
    "banana": CropProfile(
        min_temp=20, max_temp=35,
        min_rain=1000, max_rain=2000,
        moisture_ideal_min=0.5, moisture_ideal_max=0.85,
        season="Kharif",
        description="Tropical fruit crop, high water needs",
        tips="Plant in rich soil, water regularly",
    ),
    "mango": CropProfile(
        min_temp=20, max_temp=35,
        min_rain=800, max_rain=2000,
        moisture_ideal_min=0.35, moisture_ideal_max=0.7,
        season="Kharif",
        description="Tropical fruit crop, high water needs",
        tips="Prune trees, water deeply but infrequently",
    ),
    "coconut": CropProfile(
        min_temp=20, max_temp=35,
        min_rain=1500, max_rain=3000,
        moisture_ideal_min=0.5, moisture_ideal_max=0.9,
        season="Kharif",
        description="Tropical crop, high water needs",
        tips="Plant in sandy soil, water regularly",
    ),
    "tea": CropProfile(
        min_temp=12, max_temp=28,
        min_rain=1500, max_rain=3000,
        moisture_ideal_min=0.5, moisture_ideal_max=0.9,
        season="Kharif",
        description="Beverage crop, needs humid climate",
        tips="Plant in shade, water regularly",
    ),
    "coffee": CropProfile(
        min_temp=15, max_temp=30,
        min_rain=1500, max_rain=3000,
        moisture_ideal_min=0.45, moisture_ideal_max=0.9,
        season="Kharif",
        description="Beverage crop, needs humid climate",
        tips="Plant in shade, water regularly",
    ),
    "sunflower": CropProfile(
        min_temp=18, max_temp=35,
        min_rain=400, max_rain=900,
        moisture_ideal_min=0.15, moisture_ideal_max=0.4,
        season="Kharif",
        description="Oilseed crop, grows in hot climate",
        tips="Plant in full sun, water regularly",
    ),
}

# Read-only view; order is the tie-break order when ranking
CROP_PROFILES: Mapping[str, CropProfile] = MappingProxyType(_PROFILES)


def get_crop(crop_name: str) -> CropProfile:
    """Get crop profile by name (case-insensitive)"""
    key = crop_name.strip().lower()
    if key not in CROP_PROFILES:
        raise KeyError(f"Unknown crop: {crop_name}. Available: {list(CROP_PROFILES.keys())}")
    return CROP_PROFILES[key]


def list_crops() -> List[str]:
    """List all crop names in table order"""
    return list(CROP_PROFILES.keys())
