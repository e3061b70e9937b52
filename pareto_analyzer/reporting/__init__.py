"""
Reporting layer: terminal formatters and file exports for analysis reports.

Modules
-------
formatters : format_report_summary() + format_ranked_table()
             + format_recommendations() — ASCII strings for the CLI.
export     : export_to_json() + export_to_csv() + flatten_report_for_export()
             + default_report_paths().
"""
