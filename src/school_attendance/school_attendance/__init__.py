"""School Attendance package.

Feature modules (attendance, dashboard, substitutes, exports, profiles) sit on top of
an upstream data-service gateway, with a thin Flask controller layer per feature.
"""
