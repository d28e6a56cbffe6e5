from datetime import date, timedelta

from vnbank_fx import VnBankFx

print(VnBankFx.__version__)  # 0.1.0

# Default usage: Techcombank, "USD (50,100)"
fx = VnBankFx()
print([option.label for option in fx.currencies()])

# Last week of Techcombank USD (50,100) rates
today = date.today()
result = fx.fetch(today - timedelta(days=7), today)
print(result.message or f"{len(result.rows)} rows")
for row in result.rows[:2]:
    print(row.to_dict())
# => {'date': '2024-01-02', 'bank': 'Techcombank', 'currency': 'USD (50,100)', 'ask_rate': '25,450', ...}

# Switching bank resets the currency to the bank's default ("USD" for BIDV)
fx.bank = "bidv"
fx.currency = "EUR"
result = fx.fetch("2024-01-01", "2024-01-05")

# Write exchange_rates_bidv_EUR_2024-01-01_to_2024-01-05.{csv,xlsx}
if not result.is_empty:
    print(fx.export("csv"))
    print(fx.export("xlsx"))
