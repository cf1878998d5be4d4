"""Application layer - demo scenarios wiring the domain objects together."""
