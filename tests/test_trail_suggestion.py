from src.hiker.models.domain import Coordinate, TrailCandidate
from src.hiker.services.trails.service import filter_trails, suggest_trail


def _trail(tid: str, lat: float, lon: float, region: str = "Bedford", active: bool = True) -> TrailCandidate:
    return TrailCandidate(
        trail_id=tid,
        name=f"Trail {tid}",
        location=Coordinate(lat, lon),
        region=region,
        is_active=active,
    )


def test_empty_candidates_give_none():
    assert suggest_trail(Coordinate(44.73, -63.66), []) is None
    assert suggest_trail(None, []) is None


def test_no_route_falls_back_to_first_candidate():
    trails = [_trail("T1", 44.80, -63.70), _trail("T2", 44.70, -63.60)]

    assert suggest_trail(None, trails) is trails[0]


def test_nearest_trail_to_last_pickup():
    trails = [
        _trail("FAR", 44.90, -63.90),
        _trail("NEAR", 44.74, -63.66),
        _trail("MID", 44.78, -63.70),
    ]

    assert suggest_trail(Coordinate(44.73, -63.66), trails).trail_id == "NEAR"


def test_equally_near_trails_keep_list_order():
    trails = [_trail("A", 44.75, -63.5), _trail("B", 44.25, -63.5)]

    assert suggest_trail(Coordinate(44.5, -63.5), trails).trail_id == "A"


def test_filter_trails_prefers_configured_regions():
    trails = [
        _trail("T1", 44.7, -63.6, region="Bedford"),
        _trail("T2", 44.8, -63.7, region="Sackville"),
        _trail("T3", 44.9, -63.8, region="Sackville", active=False),
    ]

    assert [t.trail_id for t in filter_trails(trails)] == ["T1", "T2"]
    assert [t.trail_id for t in filter_trails(trails, ("sackville",))] == ["T2"]
    assert [t.trail_id for t in filter_trails(trails, ("Beaver Bank",))] == ["T1", "T2"]
