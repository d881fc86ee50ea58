from .admission_filter import CloudletPredicate, accept_all, any_accepted
