"""
Hazard percent scores, insufficient-data handling and failure reset
"""
import dataclasses
from types import MappingProxyType

import pytest

import scoring.hazard_scorer as hazard_scorer
from models import HazardEnum, HazardObservation, ScoringStatus, SeverityEnum
from scoring.hazard_scorer import HazardScorer, score_hazards, severity_for
from scoring.hazard_thresholds import HAZARDS, get_hazard, list_hazards
from scoring.hazards import has_hazard_function, list_hazard_functions


@pytest.fixture
def scorer():
    return HazardScorer()


def percent(obs, hazard):
    return score_hazards(obs).scores[hazard]


def test_every_hazard_has_a_registered_function():
    assert set(list_hazard_functions()) == set(HazardEnum)
    assert all(has_hazard_function(h) for h in HAZARDS)
    assert list_hazards() == ["flood", "drought", "heat", "cold", "wind", "rain", "air"]


def test_get_hazard():
    assert get_hazard("cold").required_fields == ("min_temp",)
    with pytest.raises(ValueError):
        get_hazard("volcano")


class TestFlood:
    def test_high_discharge_saturates(self):
        assert percent(HazardObservation(river_discharge=100), HazardEnum.flood) == 100

    def test_precipitation_only(self):
        assert percent(HazardObservation(precipitation=25), HazardEnum.flood) == 20

    def test_no_inputs_is_zero_not_unknown(self):
        assert percent(HazardObservation(), HazardEnum.flood) == 0


class TestDrought:
    def test_wet_soil_no_demand(self):
        obs = HazardObservation(soil_moisture_surface=0.3, soil_moisture_root=0.4, et0=0)
        assert percent(obs, HazardEnum.drought) == 0

    def test_bone_dry_high_demand(self):
        obs = HazardObservation(soil_moisture_surface=0, soil_moisture_root=0, et0=6)
        assert percent(obs, HazardEnum.drought) == 100

    def test_root_zone_weighted_highest(self):
        obs = HazardObservation(soil_moisture_surface=0.125, soil_moisture_root=0, et0=0)
        assert percent(obs, HazardEnum.drought) == 70

    @pytest.mark.parametrize("missing", ["soil_moisture_surface", "soil_moisture_root", "et0"])
    def test_any_missing_input_is_insufficient_data(self, missing):
        values = {"soil_moisture_surface": 0.1, "soil_moisture_root": 0.1, "et0": 4}
        values.pop(missing)
        assert percent(HazardObservation(**values), HazardEnum.drought) is None


class TestHeat:
    def test_stress_onset_without_vpd_is_zero(self):
        assert percent(HazardObservation(max_temp=30), HazardEnum.heat) == 0

    def test_midway(self):
        obs = HazardObservation(max_temp=37.5, vapor_pressure_deficit=3)
        assert percent(obs, HazardEnum.heat) == 50

    def test_extreme(self):
        obs = HazardObservation(max_temp=45, vapor_pressure_deficit=6)
        assert percent(obs, HazardEnum.heat) == 100

    def test_missing_max_temp(self):
        obs = HazardObservation(vapor_pressure_deficit=6)
        assert percent(obs, HazardEnum.heat) is None


class TestCold:
    @pytest.mark.parametrize("min_temp, expected", [(-2, 100), (-10, 100), (3, 50), (8, 0), (20, 0)])
    def test_frost_scale(self, min_temp, expected):
        assert percent(HazardObservation(min_temp=min_temp), HazardEnum.cold) == expected

    def test_missing_min_temp(self):
        assert percent(HazardObservation(), HazardEnum.cold) is None


def test_wind():
    assert percent(HazardObservation(wind_gust=120, wind_speed=80), HazardEnum.wind) == 100
    assert percent(HazardObservation(wind_gust=60), HazardEnum.wind) == 35
    assert percent(HazardObservation(), HazardEnum.wind) == 0


def test_heavy_rain():
    assert percent(HazardObservation(precipitation=100, heavy_precip_hours=6), HazardEnum.rain) == 100
    assert percent(HazardObservation(precipitation=50), HazardEnum.rain) == 40


def test_air_quality():
    worst = HazardObservation(pm2_5=120, pm10=240, ozone=360)
    assert percent(worst, HazardEnum.air) == 100
    assert percent(HazardObservation(pm2_5=60), HazardEnum.air) == 30
    assert percent(HazardObservation(), HazardEnum.air) == 0


def test_hazards_are_independent(scorer):
    assessment = scorer.assess(HazardObservation(min_temp=3))
    scores = assessment.scores

    assert assessment.status == ScoringStatus.ok
    assert scores[HazardEnum.cold] == 50
    assert scores[HazardEnum.drought] is None
    assert scores[HazardEnum.heat] is None
    for hazard in (HazardEnum.flood, HazardEnum.wind, HazardEnum.rain, HazardEnum.air):
        assert scores[hazard] == 0


def test_out_of_domain_input_treated_as_absent():
    obs = HazardObservation(max_temp=95, river_discharge=-5, soil_moisture_root=1.7)
    assert obs.max_temp is None
    assert obs.river_discharge is None
    assert obs.soil_moisture_root is None
    assert percent(obs, HazardEnum.heat) is None


def test_camel_case_input():
    obs = HazardObservation.model_validate({"minTemp": 3, "riverDischarge": 100, "pm2_5": 60})
    assert obs.min_temp == 3
    assert obs.pm2_5 == 60
    assert obs.present_fields() == {"min_temp", "river_discharge", "pm2_5"}


@pytest.mark.parametrize("obs", [
    HazardObservation(),
    HazardObservation(river_discharge=5000, precipitation=400),
    HazardObservation(max_temp=79, min_temp=-79, vapor_pressure_deficit=20),
    HazardObservation(wind_gust=499, wind_speed=499, pm2_5=4999, pm10=4999, ozone=4999),
    HazardObservation(soil_moisture_surface=0.01, soil_moisture_root=0.99, et0=29),
])
def test_percent_is_integer_in_range_or_none(obs):
    for result in score_hazards(obs).results:
        assert result.percent is None or (isinstance(result.percent, int) and 0 <= result.percent <= 100)


def test_result_carries_inputs_and_severity(scorer):
    result = scorer.score_hazard(HazardObservation(min_temp=-2), HAZARDS[HazardEnum.cold])
    assert result.inputs == {"min_temp": -2}
    assert result.severity == SeverityEnum.high


@pytest.mark.parametrize("value, expected", [
    (None, SeverityEnum.unknown),
    (0, SeverityEnum.low),
    (49, SeverityEnum.low),
    (50, SeverityEnum.moderate),
    (74, SeverityEnum.moderate),
    (75, SeverityEnum.high),
    (100, SeverityEnum.high),
])
def test_severity_bands(value, expected):
    assert severity_for(value) == expected


def test_computation_failure_resets_everything(scorer):
    broken_flood = dataclasses.replace(HAZARDS[HazardEnum.flood], constants=MappingProxyType({}))
    table = {HazardEnum.flood: broken_flood, HazardEnum.cold: HAZARDS[HazardEnum.cold]}

    assessment = scorer.assess(HazardObservation(min_temp=-5, river_discharge=100), hazard_table=table)

    assert assessment.failed
    assert assessment.error
    assert list(assessment.scores) == [HazardEnum.flood, HazardEnum.cold]
    assert all(score == 0 for score in assessment.scores.values())


def test_failure_covers_every_hazard_in_default_table(scorer, monkeypatch):
    def exploding(obs, hazard):
        raise ArithmeticError("bad constant")

    monkeypatch.setattr(hazard_scorer, "get_hazard_function", lambda key: exploding)
    assessment = scorer.assess(HazardObservation(min_temp=-5))

    assert assessment.status == ScoringStatus.failed
    assert assessment.error == "bad constant"
    assert set(assessment.scores) == set(HazardEnum)
    assert all(r.percent == 0 and r.severity == SeverityEnum.low for r in assessment.results)


def test_success_and_failure_cover_same_hazards(scorer):
    partial = {HazardEnum.cold: HAZARDS[HazardEnum.cold], HazardEnum.wind: HAZARDS[HazardEnum.wind]}
    ok = scorer.assess(HazardObservation(min_temp=3), hazard_table=partial)

    broken = dict(partial)
    broken[HazardEnum.wind] = dataclasses.replace(partial[HazardEnum.wind], weights=MappingProxyType({}))
    failed = scorer.assess(HazardObservation(min_temp=3), hazard_table=broken)

    assert ok.status == ScoringStatus.ok
    assert failed.status == ScoringStatus.failed
    assert list(ok.scores) == list(failed.scores) == [HazardEnum.cold, HazardEnum.wind]
