"""Alumni portal login and registration controller"""
