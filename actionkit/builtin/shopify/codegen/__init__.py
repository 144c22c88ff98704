"""Codegen templates for Shopify actions, one module per step import path"""
