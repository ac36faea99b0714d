"""Linux md RAID 5 and RAID 6 layouts and sector mapping."""