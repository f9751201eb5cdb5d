from infra_kubets.lib.aws.base import AWSModule
from infra_kubets.lib.iam import PulumiSession, RoleHandle, provision_role, resolve_policy_arn
from infra_kubets.lib.tags import get_tags
from .config import ServiceRolesConfig, ServiceRole, ServiceRolesExports, ServiceRoleExports


class ServiceRoles(AWSModule):
    def build(self, config: ServiceRolesConfig) -> ServiceRolesExports:
        names = [role.name for role in config.roles]
        if len(set(names)) != len(names):
            raise ValueError(f"Role names must be unique, got {names}")

        # Roles are provisioned one after another, the first failure aborts the rest
        roles = [self._create_role(config.path, definition) for definition in config.roles]

        return ServiceRolesExports(
            path=config.path,
            roles=[
                ServiceRoleExports(
                    name=role.name,
                    arn=role.arn,
                    policy_arns=[attachment.policy_arn for attachment in role.attachments],
                )
                for role in roles
            ],
        )

    def _create_role(self, path: str, role_definition: ServiceRole) -> RoleHandle:
        """
        Create a role assumable by a service, with managed policies attached

        :param path: IAM path
        :param role_definition: Role configuration
        :return: Handle to the role
        """
        session = PulumiSession(
            parent=self,
            path=path,
            description=role_definition.description,
            tags=get_tags("iam", role_definition.name),
        )

        return provision_role(
            session,
            role_definition.name,
            role_definition.service_principal,
            [resolve_policy_arn(policy, self.partition) for policy in role_definition.managed_policies],
        ).unwrap()
