"""The resource catalog rendered into the permissions documentation.

``build_catalog`` assembles a fresh, immutable :class:`Catalog` on every
call. Resource order here is the order of the table of contents and of
the sections on the page.
"""

from __future__ import annotations

from permstable.actions import (
    action,
    create_list_actions,
    id_actions,
    list_only_actions,
    read_update_delete_actions,
)
from permstable.model import Catalog, Endpoint, Resource

IAM_SCOPES = ("Global", "Org")
INFRA_SCOPES = ("Project",)
ALL_SCOPES = IAM_SCOPES + INFRA_SCOPES


def _collection(path: str, type_param: str, actions) -> Endpoint:
    return Endpoint(path=path, params={"Type": type_param}, actions=actions)


def _item(path: str, type_param: str, actions, pin: str | None = None) -> Endpoint:
    params = {"ID": "<id>", "Type": type_param}
    if pin:
        params["Pin"] = pin
    return Endpoint(path=path, params=params, actions=actions)


def _account() -> Resource:
    return Resource(
        type="Account",
        scopes=IAM_SCOPES,
        endpoints=[
            _collection("/accounts", "account", create_list_actions("an account")),
            _item(
                "/accounts/<id>",
                "account",
                read_update_delete_actions("an account", pin=True)
                + id_actions(
                    True,
                    ("set-password", "Set a password on an account, without requiring the current password"),
                    ("change-password", "Change a password on an account given the current password"),
                ),
                pin="<auth-method-id>",
            ),
        ],
    )


def _auth_method() -> Resource:
    return Resource(
        type="Auth Method",
        scopes=IAM_SCOPES,
        endpoints=[
            _collection("/auth-methods", "auth-method", create_list_actions("an auth method")),
            _item(
                "/auth-methods/<id>",
                "auth-method",
                read_update_delete_actions("an auth method")
                + id_actions(False, ("authenticate", "Authenticate to an auth method")),
            ),
        ],
    )


def _auth_token() -> Resource:
    return Resource(
        type="Auth Token",
        scopes=IAM_SCOPES,
        endpoints=[
            _collection("/auth-tokens", "auth-token", list_only_actions("an auth token")),
            _item(
                "/auth-tokens/<id>",
                "auth-token",
                id_actions(
                    False,
                    ("read", "Read an auth token"),
                    ("delete", "Delete an auth token"),
                ),
            ),
        ],
    )


def _group() -> Resource:
    return Resource(
        type="Group",
        scopes=ALL_SCOPES,
        endpoints=[
            _collection("/groups", "group", create_list_actions("a group")),
            _item(
                "/groups/<id>",
                "group",
                read_update_delete_actions("a group")
                + id_actions(
                    False,
                    ("add-members", "Add members to a group"),
                    ("set-members", "Set the full set of members on a group"),
                    ("remove-members", "Remove members from a group"),
                ),
            ),
        ],
    )


def _host() -> Resource:
    return Resource(
        type="Host",
        scopes=INFRA_SCOPES,
        endpoints=[
            _collection("/hosts", "host", create_list_actions("a host")),
            _item(
                "/hosts/<id>",
                "host",
                read_update_delete_actions("a host", pin=True),
                pin="<host-catalog-id>",
            ),
        ],
    )


def _host_catalog() -> Resource:
    return Resource(
        type="Host Catalog",
        scopes=INFRA_SCOPES,
        endpoints=[
            _collection("/host-catalogs", "host-catalog", create_list_actions("a host catalog")),
            _item(
                "/host-catalogs/<id>",
                "host-catalog",
                read_update_delete_actions("a host catalog"),
            ),
        ],
    )


def _host_set() -> Resource:
    return Resource(
        type="Host Set",
        scopes=INFRA_SCOPES,
        endpoints=[
            _collection("/host-sets", "host-set", create_list_actions("a host set")),
            _item(
                "/host-sets/<id>",
                "host-set",
                read_update_delete_actions("a host set", pin=True)
                + id_actions(
                    True,
                    ("add-hosts", "Add hosts to a host-set"),
                    ("set-hosts", "Set the full set of hosts on a host set"),
                    ("remove-hosts", "Remove hosts from a host set"),
                ),
                pin="<host-catalog-id>",
            ),
        ],
    )


def _managed_group() -> Resource:
    return Resource(
        type="Managed Group",
        scopes=IAM_SCOPES,
        endpoints=[
            _collection("/managed-groups", "managed-group", create_list_actions("a managed group")),
            _item(
                "/managed-groups/<id>",
                "managed-group",
                read_update_delete_actions("a managed group", pin=True),
                pin="<auth-method-id>",
            ),
        ],
    )


def _role() -> Resource:
    return Resource(
        type="Role",
        scopes=ALL_SCOPES,
        endpoints=[
            _collection("/roles", "role", create_list_actions("a role")),
            _item(
                "/roles/<id>",
                "role",
                read_update_delete_actions("a role")
                + id_actions(
                    False,
                    ("add-principals", "Add principals to a role"),
                    ("set-principals", "Set the full set of principals on a role"),
                    ("remove-principals", "Remove principals from a role"),
                    ("add-grants", "Add grants to a role"),
                    ("set-grants", "Set the full set of grants on a role"),
                    ("remove-grants", "Remove grants from a role"),
                ),
            ),
        ],
    )


def _scope() -> Resource:
    return Resource(
        type="Scope",
        scopes=IAM_SCOPES,
        endpoints=[
            _collection("/scopes", "scope", create_list_actions("a scope")),
            _item("/scopes/<id>", "scope", read_update_delete_actions("a scope")),
        ],
    )


def _session() -> Resource:
    # The item path is singular on the published page; keep it as is.
    return Resource(
        type="Session",
        scopes=INFRA_SCOPES,
        endpoints=[
            _collection("/sessions", "session", list_only_actions("a session")),
            _item(
                "/session/<id>",
                "session",
                id_actions(
                    False,
                    ("read", "Read a session"),
                    ("cancel", "Cancel a session"),
                )
                + [
                    action(
                        "read:self",
                        "Read a session, which must be associated with the calling user",
                        "ids=*;type=session;actions=read:self",
                    ),
                    action(
                        "cancel:self",
                        "Cancel a session, which must be associated with the calling user",
                        "ids=*;type=session;actions=cancel:self",
                    ),
                ],
            ),
        ],
    )


def _session_recording() -> Resource:
    return Resource(
        type="Session Recording",
        scopes=IAM_SCOPES,
        endpoints=[
            _collection(
                "/session-recordings",
                "session-recording",
                list_only_actions("a session recording"),
            ),
            _item(
                "/session-recordings/<id>",
                "session-recording",
                id_actions(
                    False,
                    ("read", "Read a session recording"),
                    ("download", "Download a session recording"),
                    ("reapply-storage-policy", "Reapply the storage policy to a session recording"),
                    ("delete", "Delete a session recording"),
                ),
            ),
        ],
    )


def _storage_bucket() -> Resource:
    return Resource(
        type="Storage Bucket",
        scopes=IAM_SCOPES,
        endpoints=[
            _collection("/storage-buckets", "storage-bucket", create_list_actions("a storage bucket")),
            _item(
                "/storage-buckets/<id>",
                "storage-bucket",
                read_update_delete_actions("a storage bucket"),
            ),
        ],
    )


def _target() -> Resource:
    return Resource(
        type="Target",
        scopes=INFRA_SCOPES,
        endpoints=[
            _collection("/targets", "target", create_list_actions("a target")),
            _item(
                "/targets/<id>",
                "target",
                read_update_delete_actions("a target")
                + id_actions(
                    False,
                    ("add-host-sources", "Add host sources to a target"),
                    ("set-host-sources", "Set the full set of host sources on a target"),
                    ("remove-host-sources", "Remove host sources from a target"),
                    ("add-credential-sources", "Add credential sources to a target"),
                    ("set-credential-sources", "Set the full set of credential sources on a target"),
                    ("remove-credential-sources", "Remove credential sources from a target"),
                    ("authorize-session", "Authorize a session via the target"),
                ),
            ),
        ],
    )


def _user() -> Resource:
    return Resource(
        type="User",
        scopes=IAM_SCOPES,
        endpoints=[
            _collection("/users", "user", create_list_actions("a user")),
            _item(
                "/users/<id>",
                "user",
                read_update_delete_actions("a user")
                + id_actions(
                    False,
                    ("add-accounts", "Add accounts to a user"),
                    ("set-accounts", "Set the full set of accounts on a user"),
                    ("remove-accounts", "Remove accounts from a user"),
                ),
            ),
        ],
    )


def _worker() -> Resource:
    return Resource(
        type="Worker",
        scopes=("Global",),
        endpoints=[
            _collection(
                "/workers",
                "worker",
                list_only_actions("a worker")
                + [
                    action(
                        "create:controller-led",
                        "Create a worker using the controller-led workflow",
                        "type=<type>;actions=create",
                        "type=<type>;actions=create:controller-led",
                    ),
                    action(
                        "create:worker-led",
                        "Create a worker using the worker-led workflow",
                        "type=<type>;actions=create",
                        "type=<type>;actions=create:worker-led",
                    ),
                ],
            ),
            _item("/workers/<id>", "worker", read_update_delete_actions("a worker")),
        ],
    )


def build_catalog() -> Catalog:
    """Build the catalog of every resource type, in page order."""
    return Catalog(
        resources=[
            _account(),
            _auth_method(),
            _auth_token(),
            _group(),
            _host(),
            _host_catalog(),
            _host_set(),
            _managed_group(),
            _role(),
            _scope(),
            _session(),
            _session_recording(),
            _storage_bucket(),
            _target(),
            _user(),
            _worker(),
        ]
    )
