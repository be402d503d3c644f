"""Content of the manifests installed by bootkube.

Templates use jinja2 syntax and reference the fields of
`install_assets.manifests.template_data.BootkubeTemplateData`.
"""

__all__ = ["TEMPLATES", "STATIC"]


KUBE_CLOUD_CONFIG = """\
apiVersion: v1
kind: Secret
metadata:
  name: kube-cloud-cfg
  namespace: kube-system
type: Opaque
data:
  config: "{{ base64_cloud_provider_config }}"
"""

MACHINE_CONFIG_SERVER_TLS_SECRET = """\
apiVersion: v1
kind: Secret
metadata:
  name: machine-config-server-tls
  namespace: openshift-machine-config-operator
type: Opaque
data:
  tls.crt: "{{ mcs_tls_cert }}"
  tls.key: "{{ mcs_tls_key }}"
"""

OPENSHIFT_SERVICE_CERT_SIGNER_SECRET = """\
apiVersion: v1
kind: Secret
metadata:
  name: service-serving-cert-signer-signing-key
  namespace: openshift-service-cert-signer
type: kubernetes.io/tls
data:
  tls.crt: "{{ service_serving_ca_cert }}"
  tls.key: "{{ service_serving_ca_key }}"
"""

PULL = """\
{
  "apiVersion": "v1",
  "kind": "Secret",
  "type": "kubernetes.io/dockerconfigjson",
  "metadata": {
    "namespace": "kube-system",
    "name": "coreos-pull-secret"
  },
  "data": {
    ".dockerconfigjson": "{{ pull_secret }}"
  }
}
"""

TECTONIC_NETWORK_OPERATOR = """\
apiVersion: apps/v1
kind: DaemonSet
metadata:
  name: tectonic-network-operator
  namespace: kube-system
  labels:
    k8s-app: tectonic-network-operator
    managed-by-channel-operator: "true"
spec:
  selector:
    matchLabels:
      k8s-app: tectonic-network-operator
  template:
    metadata:
      labels:
        k8s-app: tectonic-network-operator
        tectonic-app-version-name: tectonic-network
    spec:
      containers:
      - name: tectonic-network-operator
        image: "{{ tectonic_network_operator_image }}"
        resources:
          requests:
            cpu: 50m
            memory: 50Mi
        volumeMounts:
        - name: cluster-config
          mountPath: /etc/cluster-config
          readOnly: true
      hostNetwork: true
      restartPolicy: Always
      securityContext:
        runAsNonRoot: true
        runAsUser: 65534
      volumes:
      - name: cluster-config
        configMap:
          name: cluster-config-v1
          items:
          - key: network-config
            path: network-config
      tolerations:
      - key: node-role.kubernetes.io/master
        operator: Exists
        effect: NoSchedule
  updateStrategy:
    type: RollingUpdate
    rollingUpdate:
      maxUnavailable: 1
"""

CVO_OVERRIDES = """\
apiVersion: clusterversion.openshift.io/v1
kind: CVOConfig
metadata:
  namespace: openshift-cluster-version
  name: cluster-version-operator
upstream: http://localhost:8080/graph
channel: fast
clusterID: "{{ cvo_cluster_id }}"
overrides:
- kind: Deployment
  namespace: openshift-cluster-network-operator
  name: cluster-network-operator
  unmanaged: true
- kind: DaemonSet
  namespace: openshift-cluster-network-operator
  name: cluster-network-operator
  unmanaged: true
"""

LEGACY_CVO_OVERRIDES = """\
apiVersion: clusterversion.openshift.io/v1
kind: CVOConfig
metadata:
  namespace: openshift-cluster-version
  name: cluster-version-operator
upstream: http://localhost:8080/graph
channel: fast
clusterID: "{{ cvo_cluster_id }}"
overrides:
- kind: Deployment
  namespace: openshift-cluster-network-operator
  name: cluster-network-operator
  unmanaged: true
- kind: DaemonSet
  namespace: kube-system
  name: tectonic-network-operator
  unmanaged: true
"""

ETCD_SERVICE_ENDPOINTS_KUBE_SYSTEM = """\
apiVersion: v1
kind: Endpoints
metadata:
  name: etcd
  namespace: kube-system
  annotations:
    alpha.installer.openshift.io/dns-suffix: "{{ etcd_endpoint_dns_suffix }}"
subsets:
- addresses:
{% for hostname in etcd_endpoint_hostnames %}
  - ip: 192.0.2.{{ loop.index0 }}
    hostname: "{{ hostname }}"
{% endfor %}
  ports:
  - name: etcd
    port: 2379
    protocol: TCP
"""

KUBE_SYSTEM_CONFIGMAP_ETCD_SERVING_CA = """\
apiVersion: v1
kind: ConfigMap
metadata:
  name: etcd-serving-ca
  namespace: kube-system
binaryData:
  ca-bundle.crt: "{{ etcd_ca_cert }}"
"""

KUBE_SYSTEM_CONFIGMAP_ROOT_CA = """\
apiVersion: v1
kind: ConfigMap
metadata:
  name: root-ca
  namespace: kube-system
binaryData:
  ca.crt: "{{ root_ca_cert }}"
"""

KUBE_SYSTEM_SECRET_ETCD_CLIENT = """\
apiVersion: v1
kind: Secret
metadata:
  name: etcd-client
  namespace: kube-system
type: SecretTypeTLS
data:
  tls.crt: "{{ etcd_client_cert }}"
  tls.key: "{{ etcd_client_key }}"
"""

TEMPLATES: dict[str, str] = {
    "kube-cloud-config.yaml": KUBE_CLOUD_CONFIG,
    "machine-config-server-tls-secret.yaml": MACHINE_CONFIG_SERVER_TLS_SECRET,
    "openshift-service-signer-secret.yaml": OPENSHIFT_SERVICE_CERT_SIGNER_SECRET,
    "pull.json": PULL,
    "tectonic-network-operator.yaml": TECTONIC_NETWORK_OPERATOR,
    "cvo-overrides.yaml": CVO_OVERRIDES,
    "legacy-cvo-overrides.yaml": LEGACY_CVO_OVERRIDES,
    "etcd-service-endpoints.yaml": ETCD_SERVICE_ENDPOINTS_KUBE_SYSTEM,
    "kube-system-configmap-etcd-serving-ca.yaml": KUBE_SYSTEM_CONFIGMAP_ETCD_SERVING_CA,
    "kube-system-configmap-root-ca.yaml": KUBE_SYSTEM_CONFIGMAP_ROOT_CA,
    "kube-system-secret-etcd-client.yaml": KUBE_SYSTEM_SECRET_ETCD_CLIENT,
}


TECTONIC_NAMESPACE = """\
apiVersion: v1
kind: Namespace
metadata:
  name: tectonic-system
  labels:
    name: tectonic-system
    openshift.io/run-level: "0"
"""

OPENSHIFT_WEB_CONSOLE_NAMESPACE = """\
apiVersion: v1
kind: Namespace
metadata:
  name: openshift-web-console
  labels:
    name: openshift-web-console
"""

OPENSHIFT_MACHINE_CONFIG_OPERATOR = """\
apiVersion: v1
kind: Namespace
metadata:
  name: openshift-machine-config-operator
  labels:
    name: openshift-machine-config-operator
    openshift.io/run-level: "1"
"""

OPENSHIFT_CLUSTER_API_NAMESPACE = """\
apiVersion: v1
kind: Namespace
metadata:
  name: openshift-cluster-api
  labels:
    name: openshift-cluster-api
"""

OPENSHIFT_SERVICE_CERT_SIGNER_NAMESPACE = """\
apiVersion: v1
kind: Namespace
metadata:
  name: openshift-service-cert-signer
  labels:
    name: openshift-service-cert-signer
    openshift.io/run-level: "1"
"""

APP_VERSION_KIND = """\
apiVersion: apiextensions.k8s.io/v1
kind: CustomResourceDefinition
metadata:
  name: appversions.tco.coreos.com
spec:
  group: tco.coreos.com
  names:
    kind: AppVersion
    listKind: AppVersionList
    plural: appversions
    singular: appversion
  scope: Namespaced
  versions:
  - name: v1
    served: true
    storage: true
    schema:
      openAPIV3Schema:
        type: object
        x-kubernetes-preserve-unknown-fields: true
"""

APP_VERSION_TECTONIC_NETWORK = """\
apiVersion: tco.coreos.com/v1
kind: AppVersion
metadata:
  name: tectonic-network
  namespace: kube-system
  labels:
    managed-by-channel-operator: "true"
spec:
  desiredVersion:
  paused: false
status:
  currentVersion:
  paused: false
upgradereq: 1
upgradecomp: 0
"""

ETCD_SERVICE_KUBE_SYSTEM = """\
apiVersion: v1
kind: Service
metadata:
  name: etcd
  namespace: kube-system
spec:
  clusterIP: None
  ports:
  - name: etcd
    port: 2379
    protocol: TCP
"""

STATIC: dict[str, str] = {
    "01-tectonic-namespace.yaml": TECTONIC_NAMESPACE,
    "03-openshift-web-console-namespace.yaml": OPENSHIFT_WEB_CONSOLE_NAMESPACE,
    "04-openshift-machine-config-operator.yaml": OPENSHIFT_MACHINE_CONFIG_OPERATOR,
    "05-openshift-cluster-api-namespace.yaml": OPENSHIFT_CLUSTER_API_NAMESPACE,
    "09-openshift-service-signer-namespace.yaml": OPENSHIFT_SERVICE_CERT_SIGNER_NAMESPACE,
    "app-version-kind.yaml": APP_VERSION_KIND,
    "app-version-tectonic-network.yaml": APP_VERSION_TECTONIC_NETWORK,
    "etcd-service.yaml": ETCD_SERVICE_KUBE_SYSTEM,
}
