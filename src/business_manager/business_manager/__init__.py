"""Business Manager package.

Feature modules (employees, attendance, payroll) each carry a model, a
repository interface and a MySQL implementation. Wage and bonus figures are
computed by the payroll services from raw attendance on every request.
"""
