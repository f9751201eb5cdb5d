from .service_roles import ServiceRoles
