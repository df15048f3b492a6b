"""Transforms that change a model in place: basic, advanced, deformation and projection."""