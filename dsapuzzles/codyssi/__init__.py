"""Solvers for the Summer at the Lab and Journey to Atlantis problems."""