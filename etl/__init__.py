# WORKFLOW: ETL (Extract, Transform, Load) package for the exchange rate spreadsheet.
# Used by: Seed script, database population
# Modules include:
# 1. download.py - Fetch the published workbook
# 2. extract.py - Keep the rows that hold a day of month
# 3. transform.py - Carry month/year forward and normalize quotes
# 4. aggregate.py - Drop already persisted days, collapse repeated dates
# 5. load.py - Insert one currency_day row per date and currency
# 6. pipeline.py - Run the stages in order
#
# ETL flow: XLSX -> Extract -> Transform -> Aggregate -> currency_day table
# Re-running over the same workbook inserts nothing new.

"""
ETL package for the currency day seeder.
"""
