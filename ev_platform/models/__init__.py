# EV Platform — Database Models
# Import all models here for SQLAlchemy discovery

from ev_platform.models.vehicle import Vehicle   # noqa
