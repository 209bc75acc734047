"""Personnel tracker package.

Organized by feature modules (personnel, departments, attendance, reports)
with a thin Flask controller layer over service/repository layers that read
and write a key-value record store.
"""
