# -*- coding: utf-8 -*-
"""
MD Stepper UI Module
"""
