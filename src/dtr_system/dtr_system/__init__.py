"""DTR System package.

Daily time record (DTR) computation organized by feature modules (shifts,
attendance, approvals, payroll) with a thin Flask controller layer over
service/repository layers.
"""
