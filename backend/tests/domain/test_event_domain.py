import pytest

from pocketledger.domain.errors import ValidationError
from pocketledger.domain.expenditure import Expenditure, ExpenditureKind, ExpenditureNature, Severity
from pocketledger.domain.income import Income, IncomeType


def _income(**kw):
    base = dict(id=1, type="salary", amount=100, year=2024, month=3, timestamp=1)
    base.update(kw)
    return Income.create(**base)


def _exp(**kw):
    base = dict(id=1, expenditure_type="personal", name="Rent", amount=100, type="static", year=2024, month=3, timestamp=1)
    base.update(kw)
    return Expenditure.create(**base)


def test_salary_income_ignores_asset_type():
    i = _income(asset_type="Stocks")
    assert i.type == IncomeType.SALARY
    assert i.asset_type is None
    assert i.linked_asset_type is None


def test_asset_income_requires_asset_type():
    with pytest.raises(ValidationError):
        _income(type="asset")


def test_asset_income_links_asset_type():
    i = _income(type="asset", asset_type="Stocks")
    assert i.linked_asset_type == "Stocks"


def test_income_rejects_unknown_type():
    with pytest.raises(ValidationError):
        _income(type="bonus")


def test_income_amount_required():
    with pytest.raises(ValidationError):
        _income(amount=None)


@pytest.mark.parametrize("month", [0, 13])
def test_income_month_range(month):
    with pytest.raises(ValidationError):
        _income(month=month)


def test_personal_expenditure_requires_name():
    with pytest.raises(ValidationError):
        _exp(name="")


def test_other_expenditure_requires_liability_type():
    with pytest.raises(ValidationError):
        _exp(expenditure_type="other", name=None)


def test_other_expenditure_drops_name():
    e = _exp(expenditure_type="other", liability_type="Mortgage")
    assert e.expenditure_type == ExpenditureKind.OTHER
    assert e.name is None
    assert e.linked_liability_type == "Mortgage"


def test_static_expenditure_has_no_state():
    e = _exp(state="high")
    assert e.type == ExpenditureNature.STATIC
    assert e.state is None


def test_dynamic_expenditure_defaults_to_medium():
    assert _exp(type="dynamic").state == Severity.MEDIUM


def test_dynamic_expenditure_rejects_unknown_state():
    with pytest.raises(ValidationError):
        _exp(type="dynamic", state="extreme")
