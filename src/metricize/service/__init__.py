"""HTTP service exposing the dimension converter."""
