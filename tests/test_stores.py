from unittest.mock import MagicMock

from autoorder.gmaps_autoorder.models import Campaign, GeoTarget
from autoorder.gmaps_autoorder.stores import RegistryStore, TrackerStore, like_escape


def _engine(rows=None, scalar=None, rowcount=None):
    conn = MagicMock()
    result = conn.execute.return_value
    result.mappings.return_value.all.return_value = rows or []
    result.scalar.return_value = scalar
    result.rowcount = rowcount
    engine = MagicMock()
    engine.begin.return_value.__enter__.return_value = conn
    return engine, conn


def _sql_and_params(conn):
    clause, params = conn.execute.call_args[0]
    return " ".join(str(clause).split()), params


def test_like_escape():
    assert like_escape("100%_Pure\\ (GMaps)") == "100\\%\\_Pure\\\\ (GMaps)"


def test_fetch_active_campaigns_filters_by_marker_in_id_order():
    engine, conn = _engine(rows=[{"id": 4, "campaign_name": "A (GMaps)"}, {"id": 9, "campaign_name": "B (gmaps)"}])

    campaigns = RegistryStore(engine).fetch_active_campaigns()

    assert campaigns == [Campaign(4, "A (GMaps)"), Campaign(9, "B (gmaps)")]
    sql, params = _sql_and_params(conn)
    assert "ILIKE" in sql
    assert "is_active = true" in sql
    assert "ORDER BY ic.id ASC" in sql
    assert params == {"pattern": "%(GMaps)%"}


def test_campaign_city_targets_query():
    engine, conn = _engine(rows=[{"city_name": "Austin", "state_code": "TX"}])

    targets = RegistryStore(engine).fetch_campaign_city_targets(12)

    assert targets == [GeoTarget("Austin", "TX")]
    sql, params = _sql_and_params(conn)
    assert "FROM campaign_cities cc" in sql
    assert "client_city_claims" not in sql
    assert params == {"campaign_id": 12, "county_pattern": "%county%"}


def test_claimed_city_targets_join_through_client():
    engine, conn = _engine(rows=[])

    assert RegistryStore(engine).fetch_claimed_city_targets(12) == []
    sql, params = _sql_and_params(conn)
    assert "FROM client_city_claims ccc" in sql
    assert "ic.client_id = ccc.client_id" in sql
    assert "campaign_cities" not in sql
    assert params["campaign_id"] == 12


def test_count_existing_batches_matches_link_name_and_prefix():
    engine, conn = _engine(scalar=2)

    cnt = TrackerStore(engine).count_existing_batches(Campaign(7, "Acme_1 (GMaps)"))

    assert cnt == 2
    sql, params = _sql_and_params(conn)
    assert "lead_recycling_campaign_id = :campaign_id" in sql
    assert "campaign_name = :campaign_name" in sql
    assert "name LIKE :name_prefix" in sql
    assert params == {
        "campaign_id": 7,
        "campaign_name": "Acme_1 (GMaps)",
        "name_prefix": "Acme\\_1 (GMaps)%",
    }


def test_count_existing_batches_null_is_zero():
    engine, _ = _engine(scalar=None)
    assert TrackerStore(engine).count_existing_batches(Campaign(7, "X (GMaps)")) == 0


def test_set_batch_campaign_name():
    engine, conn = _engine(rowcount=1)

    assert TrackerStore(engine).set_batch_campaign_name("b-1", "Acme (GMaps)") == 1
    sql, params = _sql_and_params(conn)
    assert sql.startswith("UPDATE jobs_batch SET campaign_name = :campaign_name")
    assert params == {"campaign_name": "Acme (GMaps)", "batch_id": "b-1"}
