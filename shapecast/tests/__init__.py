# Copyright (c) 2025 shapecast developers. All rights reserved.
