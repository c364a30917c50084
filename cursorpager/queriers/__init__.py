""" Ready-made queriers """

from .base import OrderingsRegistry
from .memory import ListQuerier
from .sa import SAQuerier
