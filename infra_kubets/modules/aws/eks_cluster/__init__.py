from .eks_cluster import EKSCluster
