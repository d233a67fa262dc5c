from config.jurisdiction import JurisdictionConfig, default_jurisdiction
from tax.brackets import progressive_amount

from .models import ScenarioInputs, UpfrontCosts


def compute_transfer_duty(
    price: float,
    is_first_home_buyer: bool,
    config: JurisdictionConfig | None = None,
) -> float:
    """
    Transfer (stamp) duty on the purchase price, rounded to whole dollars.

    First-home purchases at or below the concession cap pay nothing.
    """
    cfg = config or default_jurisdiction()
    if is_first_home_buyer and price <= cfg.first_home_concession_cap:
        return 0.0
    return float(round(progressive_amount(cfg.transfer_duty_brackets, price)))


def qualifies_for_deposit_scheme(
    loan_amount: float,
    price: float,
    is_first_home_buyer: bool,
    use_government_scheme: bool,
    config: JurisdictionConfig | None = None,
) -> bool:
    cfg = config or default_jurisdiction()
    scheme = cfg.deposit_scheme
    deposit_share = 1 - loan_amount / price
    return (
        use_government_scheme
        and is_first_home_buyer
        and scheme.enabled
        and price <= scheme.property_cap
        and deposit_share >= scheme.minimum_deposit
    )


def compute_mortgage_insurance(
    loan_amount: float,
    price: float,
    is_first_home_buyer: bool = False,
    use_government_scheme: bool = False,
    config: JurisdictionConfig | None = None,
) -> float:
    """
    Lenders mortgage insurance premium (simplified).

    Nothing is owed at or below the no-LMI LVR, or when the government deposit
    scheme guarantees the loan. Above it the premium scales with how far the
    LVR exceeds that threshold.
    """
    cfg = config or default_jurisdiction()
    if qualifies_for_deposit_scheme(loan_amount, price, is_first_home_buyer, use_government_scheme, cfg):
        return 0.0

    lvr = loan_amount / price
    if lvr <= cfg.loan.lvr_no_lmi:
        return 0.0

    lmi_rate = cfg.loan.lmi_rate * (lvr - cfg.loan.lvr_no_lmi) * 2
    return float(round(loan_amount * lmi_rate))


def compute_upfront_costs(inputs: ScenarioInputs, config: JurisdictionConfig | None = None) -> UpfrontCosts:
    cfg = config or default_jurisdiction()
    return UpfrontCosts(
        transfer_duty=compute_transfer_duty(inputs.property_price, inputs.is_first_home_buyer, cfg),
        mortgage_insurance=compute_mortgage_insurance(
            inputs.loan_amount,
            inputs.property_price,
            inputs.is_first_home_buyer,
            inputs.use_government_scheme,
            cfg,
        ),
        legal_fees=cfg.transaction_costs.buyer_legal_fees,
        inspections=cfg.transaction_costs.inspections,
    )
