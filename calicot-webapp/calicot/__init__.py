"""
Calicot WebApp backend root package.

FastAPI entry point (main.py), controllers, the Produit document store,
GridFS blob storage and cookie/JWT/Google authentication.
"""
