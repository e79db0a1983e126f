from simulation import CSRFSimulator

# One simulator per process, shared by every request the web layer handles.
# CSRFSimulator serializes its own operations.
simulator = CSRFSimulator()
