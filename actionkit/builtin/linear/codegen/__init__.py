"""Codegen templates for Linear actions, one module per step import path"""
