"""Domain services for net worth aggregates."""

from logging import Logger

from budget_engine.domain.models.accounts import (
    Account,
    AccountType,
    NetWorthSummary,
)


def validate_balance_sign(
    account: Account,
    balance: int,
    logger: Logger,
) -> None:
    """Warn when a calculated balance is negative.

    Args:
        account: Account the balance belongs to.
        balance: Calculated balance in minor units.
        logger: Logger used for warnings.
    """
    if balance < 0:
        logger.warning(
            f"{account.account_type.value} balance is negative for "
            f"account={account.id}: {balance}"
        )


def compute_net_worth_summary(
    balances: list[tuple[Account, int]],
    *,
    currency: str,
    logger: Logger,
) -> NetWorthSummary:
    """Compute net worth totals from calculated account balances.

    Inactive accounts and accounts in another currency are skipped.

    Args:
        balances: Pairs of account and calculated balance.
        currency: Currency the summary is expressed in.
        logger: Logger used for warnings.

    Returns:
        NetWorthSummary: Asset, liability and net worth totals.
    """
    total_assets = 0
    total_liabilities = 0
    assets_by_subtype: dict[str, int] = {}
    liabilities_by_subtype: dict[str, int] = {}

    for account, balance in balances:
        if not account.is_active:
            continue
        if account.currency != currency:
            logger.warning(
                f"Skipping account {account.id} in {account.currency}; "
                f"net worth is computed in {currency}"
            )
            continue
        validate_balance_sign(account, balance, logger)
        if account.account_type == AccountType.ASSET:
            total_assets += balance
            assets_by_subtype[account.subtype] = (
                assets_by_subtype.get(account.subtype, 0) + balance
            )
        else:
            total_liabilities += balance
            liabilities_by_subtype[account.subtype] = (
                liabilities_by_subtype.get(account.subtype, 0) + balance
            )

    return NetWorthSummary(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=total_assets - total_liabilities,
        assets_by_subtype=dict(sorted(assets_by_subtype.items())),
        liabilities_by_subtype=dict(sorted(liabilities_by_subtype.items())),
        currency=currency,
    )


__all__ = ["validate_balance_sign", "compute_net_worth_summary"]
