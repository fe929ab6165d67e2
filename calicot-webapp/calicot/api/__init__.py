"""
HTTP layer of the Calicot web app.

Controllers follow the {controller}/{action}/{id} layout (produits, files,
users, account); middleware covers cookie policy, HSTS and JWT bearer
resolution.
"""
