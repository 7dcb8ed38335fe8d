KUBE_APISERVER = "kube-apiserver"
KUBE_CONTROLLER_MANAGER = "kube-controller-manager"
KUBE_SCHEDULER = "kube-scheduler"
KUBE_PROXY = "kube-proxy"
ETCD = "etcd"

# Order matters: image lists are built in this order
CONTROL_PLANE_COMPONENTS = (KUBE_APISERVER, KUBE_CONTROLLER_MANAGER, KUBE_SCHEDULER)

# component -> image name published in the repository
CONTROL_PLANE_IMAGE_NAMES = {
    KUBE_APISERVER: "kube-apiserver",
    KUBE_CONTROLLER_MANAGER: "kube-controller-manager",
    KUBE_SCHEDULER: "kube-scheduler",
}

GROUP_NAME = "kubeadm.k8s.io"

DEFAULT_IMAGE_REPOSITORY = "k8s.gcr.io"
DEFAULT_KUBERNETES_VERSION = "v1.11.0"

DEFAULT_ETCD_VERSION = "3.2.18"
# kubernetes minor version -> etcd version
SUPPORTED_ETCD_VERSIONS = {
    10: "3.1.12",
    11: "3.2.18",
    12: "3.2.18",
}

PAUSE_IMAGE = "pause"
PAUSE_VERSION = "3.1"

COREDNS_IMAGE = "coredns"
COREDNS_VERSION = "1.1.3"
KUBE_DNS_IMAGE = "k8s-dns-kube-dns"
KUBE_DNS_VERSION = "1.14.10"
COREDNS_FEATURE_GATE = "CoreDNS"

DEFAULT_API_BIND_PORT = 6443
DEFAULT_SERVICE_SUBNET = "10.96.0.0/12"
DEFAULT_DNS_DOMAIN = "cluster.local"
DEFAULT_ETCD_DATA_DIR = "/var/lib/etcd"
DEFAULT_CRI_SOCKET = "/var/run/dockershim.sock"
