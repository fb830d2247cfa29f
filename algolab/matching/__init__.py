"""Gale-Shapley stable matching of students and teachers."""