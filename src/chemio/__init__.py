"""Conversión entre el modelo `molcore` y toolkits externos."""
