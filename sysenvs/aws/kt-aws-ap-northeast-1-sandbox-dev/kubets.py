# This file is boilerplate. Copy it to any new sysenv you create.
# It calls the launcher that ships with `infra_kubets`, which picks the module to run from the stack name:
# stack `eks-cluster` runs `infra_kubets/modules/aws/eks_cluster`, stack `service-roles` runs `service_roles`.
from infra_kubets.launcher import run_active_stack

run_active_stack("aws")
