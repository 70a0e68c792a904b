"""Solvers for the Kingdom of Algorithmia quests."""