"""Budget accounting and reconciliation core for household finance."""
