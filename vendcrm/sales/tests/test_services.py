from decimal import Decimal

import pytest

from tests.factories import create_opportunity
from vendcrm.sales.models import Opportunity
from vendcrm.sales.services import move_to_stage
from vendcrm.sales.services import pipeline_summary

pytestmark = pytest.mark.django_db


def test_closing_stamps_and_reopening_clears_close_date():
    deal = create_opportunity()

    move_to_stage(deal, Opportunity.Stage.CLOSED_WON)
    deal.refresh_from_db()
    assert deal.close_date is not None
    assert deal.status == "won"

    move_to_stage(deal, Opportunity.Stage.PROPOSAL)
    deal.refresh_from_db()
    assert deal.close_date is None
    assert deal.status == "open"


def test_pipeline_summary_lists_every_stage():
    create_opportunity(value=Decimal("100.00"))
    create_opportunity(value=Decimal("250.00"))
    create_opportunity(value=Decimal("50.00"), stage=Opportunity.Stage.CLOSED_LOST)

    summary = {row["stage"]: row for row in pipeline_summary()}

    assert list(summary) == Opportunity.Stage.values
    assert summary["prospecting"]["count"] == 2  # noqa: PLR2004
    assert summary["prospecting"]["total_value"] == Decimal("350.00")
    assert summary["closed-lost"]["count"] == 1
    assert summary["proposal"]["count"] == 0
    assert summary["proposal"]["total_value"] == Decimal("0.00")
