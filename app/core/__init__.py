"""Configuration, constantes et tables de référence"""
