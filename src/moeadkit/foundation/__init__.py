"""Foundation layer: exceptions, logging, solution model, problems and evaluation."""
