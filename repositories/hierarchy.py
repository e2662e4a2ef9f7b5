from models import HierarchyNode, HierarchyStatistics


class HierarchyRepository:
    def get_tree(self) -> list[HierarchyNode]:
        raise NotImplementedError  # pragma: no cover

    def get_statistics(self) -> HierarchyStatistics:
        raise NotImplementedError  # pragma: no cover
