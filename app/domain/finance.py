"""
주택 비용 모델
모기지 상환액과 월 보유 비용을 추정합니다.
"""

from app.schemas.listing import Listing

DEFAULT_DOWN_PAYMENT_PCT = 0.20   # 계약금 20%
DEFAULT_INTEREST_RATE = 0.065     # 연 6.5%
DEFAULT_LOAN_TERM_YEARS = 30

# 추정치가 없을 때 매매가 대비 연간 비율
DEFAULT_TAX_RATE = 0.012
DEFAULT_INSURANCE_RATE = 0.006


def monthly_payment(
    price: float,
    down_payment_pct: float = DEFAULT_DOWN_PAYMENT_PCT,
    annual_rate: float = DEFAULT_INTEREST_RATE,
    term_years: int = DEFAULT_LOAN_TERM_YEARS,
) -> float:
    """
    원리금 균등상환 월 납입액

    M = P * r(1+r)^n / ((1+r)^n - 1)
    P = 대출 원금, r = 월 이율, n = 납입 횟수

    금리가 0이면 원금을 납입 횟수로 나눈 값을 그대로 반환합니다.
    """
    principal = price * (1 - down_payment_pct)
    rate = annual_rate / 12
    payments = term_years * 12

    if rate == 0:
        return principal / payments

    growth = (1 + rate) ** payments
    return principal * (rate * growth) / (growth - 1)


def monthly_taxes_insurance(listing: Listing) -> float:
    """월 재산세 + 보험료 (추정치 없으면 매매가 기준 기본 비율)"""
    taxes = listing.taxes_annual_estimate
    if taxes is None:
        taxes = listing.price * DEFAULT_TAX_RATE

    insurance = listing.insurance_annual_estimate
    if insurance is None:
        insurance = listing.price * DEFAULT_INSURANCE_RATE

    return (taxes + insurance) / 12


def total_monthly_payment(listing: Listing) -> float:
    """월 총 주거비: 모기지 + 세금/보험 + HOA"""
    hoa = listing.hoa_monthly or 0
    return monthly_payment(listing.price) + monthly_taxes_insurance(listing) + hoa
