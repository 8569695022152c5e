"""Main API router for DDD architecture"""

from fastapi import APIRouter

from .routes import auth, users, cart, orders, payment_methods, locations, settings

# Main API router
api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/profile", tags=["profile"])
api_router.include_router(cart.router, prefix="/cart", tags=["cart"])
api_router.include_router(orders.router, prefix="/orders", tags=["orders"])
api_router.include_router(payment_methods.router, prefix="/payment-methods", tags=["payment-methods"])
api_router.include_router(locations.router, prefix="/locations", tags=["locations"])
api_router.include_router(settings.router, prefix="/settings", tags=["settings"])
