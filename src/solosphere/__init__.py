"""SoloSphere: freelance job marketplace backend.

Buyers post jobs, freelancers bid on them, buyers accept or reject
the bids. Sessions are JWT cookies issued by this service.
"""

__version__ = "0.1.0"
