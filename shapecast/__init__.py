# Copyright (c) 2025 shapecast developers. All rights reserved.

"""
*shapecast* binds loosely-typed data (such as decoded JSON documents
obtained from third-party APIs) onto graphs of declared target types.
"""

from shapecast.binder import (
    Binder,
    BindingIssue,
)
from shapecast.model import BoundModel
from shapecast.registry import TypeRegistry
